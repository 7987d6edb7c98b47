"""Canonical highlights entities.

- Products are snapshotted into schedule items at assignment time
- Final prices are derived on every read, never stored
- A weekly schedule always carries all seven days (Sunday=0 ... Saturday=6)
- JSON names are camelCase; Python attribute names are snake_case
"""

import uuid
from collections.abc import Iterator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from menu_admin.highlights.discount import Discount, calculate_final_price
from menu_admin.highlights.errors import ValidationError
from menu_admin.highlights.money import Money
from menu_admin.highlights.weekdays import DAY_IDS

ItemId = int | str


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_item_id() -> str:
    return str(uuid.uuid4())


class CamelModel(BaseModel):
    """Base model accepting both camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """Catalog product (read-only to the highlights core).

    Attributes:
        id: Catalog product id
        name: Display name
        description: Short description
        price: Base price
        image_url: Picture shown on the menu card
        category: Catalog category name
        available: False hides the product from the add-product picker
    """

    id: ItemId
    name: str
    description: str = ""
    price: Money = Field(ge=0)
    image_url: str = ""
    category: str = ""
    available: bool = True


def coerce_product(product: Product | dict) -> Product:
    """Turn caller input into a Product.

    Raises:
        ValidationError: If required product fields are missing or malformed
    """
    if isinstance(product, Product):
        return product
    try:
        return Product.model_validate(product)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError({"product": f"Invalid product ({location}): {first['msg']}"}) from e


class ScheduleItem(CamelModel):
    """One product assigned to one weekday.

    Attributes:
        id: Item id, unique within its day
        product_id: Id of the scheduled product
        product: Snapshot of the product taken at assignment time
        discount: Discount applied on this day
        active: Inactive items stay scheduled but are not shown or counted as savings
        added_at: When the item was created (reset on copy)
        updated_at: Last discount/status change
    """

    id: ItemId = Field(default_factory=new_item_id)
    product_id: ItemId
    product: Product
    discount: Discount = Field(default_factory=Discount)
    active: bool = True
    added_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime | None = None

    @computed_field(alias="finalPrice")
    @property
    def final_price(self) -> Money:
        return calculate_final_price(self.product.price, self.discount)

    @property
    def savings(self) -> Decimal:
        return self.product.price - self.final_price


def _day_items(day_id: int, items: Any) -> list[Any]:
    if not isinstance(items, (list, tuple)):
        raise ValueError(f"Day {day_id} must hold a list of items, got {type(items).__name__}")
    return list(items)


class WeeklySchedule(BaseModel):
    """Day-indexed schedule; days[day_id] is the ordered item list for that day.

    Accepts either a list of day lists or a {"0": [...], ..., "6": [...]}
    mapping. Missing days are filled with empty lists.
    """

    days: list[list[ScheduleItem]] = Field(default_factory=lambda: [[] for _ in DAY_IDS])

    @model_validator(mode="before")
    @classmethod
    def _wrap_mapping(cls, data: Any) -> Any:
        if isinstance(data, dict) and "days" not in data:
            return {"days": data}
        if isinstance(data, list):
            return {"days": data}
        return data

    @field_validator("days", mode="before")
    @classmethod
    def _complete_days(cls, value: Any) -> list[list[Any]]:
        days: list[list[Any]] = [[] for _ in DAY_IDS]
        if isinstance(value, dict):
            for key, items in value.items():
                day_id = int(key)
                if day_id not in DAY_IDS:
                    raise ValueError(f"Invalid day id: {key}. Must be an integer in 0-6")
                days[day_id] = _day_items(day_id, items)
            return days
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"Schedule days must be a list or a day mapping, got {type(value).__name__}")
        if len(value) > len(DAY_IDS):
            raise ValueError(f"A week has {len(DAY_IDS)} days, got {len(value)}")
        days[: len(value)] = [_day_items(day_id, items) for day_id, items in enumerate(value)]
        return days

    @model_validator(mode="after")
    def _check_day_invariants(self) -> "WeeklySchedule":
        for day_id, items in enumerate(self.days):
            product_ids = [item.product_id for item in items]
            if len(product_ids) != len(set(product_ids)):
                raise ValueError(f"Day {day_id} schedules the same product more than once")
            item_ids = [item.id for item in items]
            if len(item_ids) != len(set(item_ids)):
                raise ValueError(f"Day {day_id} has duplicate schedule item ids")
        return self

    def __getitem__(self, day_id: int) -> list[ScheduleItem]:
        return self.days[day_id]

    def iter_days(self) -> Iterator[tuple[int, list[ScheduleItem]]]:
        yield from enumerate(self.days)

    def all_items(self) -> list[ScheduleItem]:
        return [item for items in self.days for item in items]

    def to_mapping(self, *, mode: str = "python", by_alias: bool = True) -> dict[str, list[dict[str, Any]]]:
        """Serialise as {"0": [...], ..., "6": [...]}."""
        return {
            str(day_id): [item.model_dump(mode=mode, by_alias=by_alias) for item in items]
            for day_id, items in self.iter_days()
        }


class HighlightsConfig(CamelModel):
    """Singleton configuration of the highlights feature."""

    id: int = 1
    title: str
    description: str = ""
    active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class MostProductiveDay(CamelModel):
    day_id: int
    day_name: str
    product_count: int


class ScheduleStatistics(CamelModel):
    """Aggregates derived from a WeeklySchedule (never stored).

    Attributes:
        total_products: Items across all seven days
        active_products: Active items across all seven days
        days_with_products: Days with at least one item
        total_savings: Sum of price - final_price over active items
        average_discount: Mean effective discount % over active items
        most_productive_day: Day with most active items (lowest id wins ties)
    """

    total_products: int
    active_products: int
    days_with_products: int
    total_savings: Money
    average_discount: Money
    most_productive_day: MostProductiveDay | None = None
