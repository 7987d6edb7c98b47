"""Product catalog filter for the add-product picker.

Holds a point-in-time snapshot of assignable products plus the filter state.
filtered_products is recomputed on every access, so it can never disagree
with the current filters or snapshot.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Literal, get_args

from loguru import logger

from menu_admin.config.settings import settings
from menu_admin.highlights.money import ZERO, to_decimal
from menu_admin.highlights.types import Product, coerce_product

SortBy = Literal["name", "price"]
SortOrder = Literal["asc", "desc"]


def default_price_range() -> tuple[Decimal, Decimal]:
    return (ZERO, to_decimal(settings.default_price_range_max))


@dataclass(frozen=True)
class CatalogFilterState:
    """Current picker filters.

    Attributes:
        search_term: Case-insensitive substring matched against product names
        selected_category: Exact category match; "" means any category
        price_range: Inclusive (min, max) price bounds
        sort_by: "name" or "price"
        sort_order: "asc" or "desc"
    """

    search_term: str = ""
    selected_category: str = ""
    price_range: tuple[Decimal, Decimal] = (ZERO, Decimal("100"))
    sort_by: SortBy = "name"
    sort_order: SortOrder = "asc"


def _sort_key(sort_by: SortBy):
    if sort_by == "price":
        return lambda product: product.price
    return lambda product: product.name.casefold()


def filter_products(products: Iterable[Product], state: CatalogFilterState) -> list[Product]:
    """Apply search, category and price filters, then sort.

    Unavailable products are never offered. Sorting is stable: products with
    equal keys keep their catalog order in both directions.
    """
    term = state.search_term.casefold()
    low, high = state.price_range

    matches = [
        product
        for product in products
        if product.available
        and (not term or term in product.name.casefold())
        and (not state.selected_category or product.category == state.selected_category)
        and low <= product.price <= high
    ]
    return sorted(matches, key=_sort_key(state.sort_by), reverse=state.sort_order == "desc")


class ProductCatalogFilter:
    """Filter state over a catalog snapshot."""

    def __init__(self, products: Iterable[Product | dict] = ()) -> None:
        self._products: tuple[Product, ...] = ()
        self._state = CatalogFilterState(price_range=default_price_range())
        self.set_products(products)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def state(self) -> CatalogFilterState:
        return self._state

    @property
    def search_term(self) -> str:
        return self._state.search_term

    @property
    def selected_category(self) -> str:
        return self._state.selected_category

    @property
    def price_range(self) -> tuple[Decimal, Decimal]:
        return self._state.price_range

    @property
    def sort_by(self) -> SortBy:
        return self._state.sort_by

    @property
    def sort_order(self) -> SortOrder:
        return self._state.sort_order

    @property
    def filtered_products(self) -> list[Product]:
        return filter_products(self._products, self._state)

    @property
    def categories(self) -> list[str]:
        """Sorted unique categories present in the snapshot."""
        return sorted({product.category for product in self._products if product.category})

    def set_products(self, products: Iterable[Product | dict]) -> None:
        """Replace the catalog snapshot (refreshed by the caller)."""
        self._products = tuple(coerce_product(product) for product in products)
        logger.debug("Catalog snapshot replaced", product_count=len(self._products))

    def set_search_term(self, term: str) -> None:
        self._state = replace(self._state, search_term=term or "")

    def set_selected_category(self, category: str) -> None:
        self._state = replace(self._state, selected_category=category or "")

    def set_price_range(self, minimum: Decimal | float | int, maximum: Decimal | float | int) -> None:
        """Set inclusive price bounds.

        Raises:
            ValueError: If a bound is negative or minimum > maximum
        """
        low, high = to_decimal(minimum), to_decimal(maximum)
        if low < 0 or high < 0:
            raise ValueError(f"Price range bounds must be >= 0, got [{low}, {high}]")
        if low > high:
            raise ValueError(f"Price range minimum ({low}) must be <= maximum ({high})")
        self._state = replace(self._state, price_range=(low, high))

    def set_sort_by(self, sort_by: SortBy) -> None:
        if sort_by not in get_args(SortBy):
            raise ValueError(f"Invalid sort_by: {sort_by}. Must be 'name' or 'price'")
        self._state = replace(self._state, sort_by=sort_by)

    def set_sort_order(self, sort_order: SortOrder) -> None:
        if sort_order not in get_args(SortOrder):
            raise ValueError(f"Invalid sort_order: {sort_order}. Must be 'asc' or 'desc'")
        self._state = replace(self._state, sort_order=sort_order)

    def clear_filters(self) -> None:
        """Reset every filter field to its default."""
        self._state = CatalogFilterState(price_range=default_price_range())
