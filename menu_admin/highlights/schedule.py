"""Weekly schedule store - owner of the day -> items mapping.

Item lifecycle: created -> active <-> inactive -> removed (terminal).

Rules:
- A product appears at most once per day (it may repeat on other days)
- Final prices are derived from the product snapshot and discount, never set
- Every failure leaves the schedule exactly as it was
- Removing, toggling or re-pricing an unknown item id is a no-op
- Statistics are recomputed from the schedule on every read
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from menu_admin.highlights.discount import Discount, coerce_discount, ensure_valid_discount
from menu_admin.highlights.errors import DuplicateProductInDay, HighlightsError, InvalidDayError
from menu_admin.highlights.results import CopyDayOutcome, OperationResult
from menu_admin.highlights.statistics import compute_statistics
from menu_admin.highlights.types import (
    ItemId,
    Product,
    ScheduleItem,
    ScheduleStatistics,
    WeeklySchedule,
    coerce_product,
    new_item_id,
    utc_now,
)
from menu_admin.highlights.weekdays import is_valid_day_id


def _require_day(day_id: Any, field: str = "day_id") -> int:
    if not is_valid_day_id(day_id):
        raise InvalidDayError(day_id, field)
    return day_id


def _copy_item(item: ScheduleItem) -> ScheduleItem:
    return item.model_copy(deep=True, update={"id": new_item_id(), "added_at": utc_now(), "updated_at": None})


class WeeklyScheduleStore:
    """Single owner of the weekly schedule.

    Reads hand out deep copies; mutations go through the operations below and
    return OperationResult values instead of raising.
    """

    def __init__(self, schedule: WeeklySchedule | None = None) -> None:
        self._schedule = schedule.model_copy(deep=True) if schedule is not None else WeeklySchedule()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def schedule(self) -> WeeklySchedule:
        return self._schedule.model_copy(deep=True)

    @property
    def statistics(self) -> ScheduleStatistics:
        return compute_statistics(self._schedule)

    def get_day_items(self, day_id: int) -> list[ScheduleItem]:
        """Items scheduled on a day, in insertion order.

        Raises:
            InvalidDayError: If day_id is outside 0-6
        """
        return [item.model_copy(deep=True) for item in self._schedule[_require_day(day_id)]]

    def get_active_items(self, day_id: int) -> list[ScheduleItem]:
        return [item for item in self.get_day_items(day_id) if item.active]

    def find_item(self, day_id: int, schedule_item_id: ItemId) -> ScheduleItem | None:
        index = self._index_of(_require_day(day_id), schedule_item_id)
        if index is None:
            return None
        return self._schedule[day_id][index].model_copy(deep=True)

    def replace_schedule(self, schedule: WeeklySchedule) -> None:
        """Swap in a whole schedule (session restore)."""
        self._schedule = schedule.model_copy(deep=True)
        logger.info("Weekly schedule replaced", total_products=len(self._schedule.all_items()))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_product_to_day(
        self,
        day_id: int,
        product: Product | dict,
        discount: Discount | dict | None = None,
    ) -> OperationResult:
        """Schedule a product on a day.

        Fails with DuplicateProductInDay if the product is already on that day,
        and with InvalidDiscountRange / DiscountExceedsPrice for a bad discount.
        """

        def operation() -> ScheduleItem:
            day = _require_day(day_id)
            snapshot = coerce_product(product).model_copy(deep=True)
            applied = coerce_discount(discount)

            if any(item.product_id == snapshot.id for item in self._schedule[day]):
                raise DuplicateProductInDay(day, snapshot.id)
            ensure_valid_discount(applied, snapshot.price)

            item = ScheduleItem(product_id=snapshot.id, product=snapshot, discount=applied)
            self._schedule[day].append(item)
            logger.info(
                "Product added to day",
                day_id=day,
                schedule_item_id=item.id,
                product_id=snapshot.id,
                final_price=str(item.final_price),
            )
            return item.model_copy(deep=True)

        return self._run("add_product_to_day", operation, day_id=day_id)

    def remove_product_from_day(self, day_id: int, schedule_item_id: ItemId) -> OperationResult:
        """Remove an item. Unknown ids are a no-op (data is None)."""

        def operation() -> ScheduleItem | None:
            day = _require_day(day_id)
            index = self._index_of(day, schedule_item_id)
            if index is None:
                logger.debug("Remove ignored, item not found", day_id=day, schedule_item_id=schedule_item_id)
                return None
            removed = self._schedule[day].pop(index)
            logger.info("Product removed from day", day_id=day, schedule_item_id=removed.id, product_id=removed.product_id)
            return removed

        return self._run("remove_product_from_day", operation, day_id=day_id)

    def update_product_discount(
        self,
        day_id: int,
        schedule_item_id: ItemId,
        new_discount: Discount | dict | None,
    ) -> OperationResult:
        """Replace an item's discount; its final price follows automatically."""

        def operation() -> ScheduleItem | None:
            day = _require_day(day_id)
            applied = coerce_discount(new_discount)
            index = self._index_of(day, schedule_item_id)
            if index is None:
                logger.debug("Discount update ignored, item not found", day_id=day, schedule_item_id=schedule_item_id)
                return None

            current = self._schedule[day][index]
            ensure_valid_discount(applied, current.product.price)
            updated = current.model_copy(update={"discount": applied, "updated_at": utc_now()})
            self._schedule[day][index] = updated
            logger.info(
                "Product discount updated",
                day_id=day,
                schedule_item_id=updated.id,
                discount_type=applied.type,
                final_price=str(updated.final_price),
            )
            return updated.model_copy(deep=True)

        return self._run("update_product_discount", operation, day_id=day_id)

    def toggle_product_status(self, day_id: int, schedule_item_id: ItemId) -> OperationResult:
        """Flip an item's active flag. The final price is unaffected."""

        def operation() -> ScheduleItem | None:
            day = _require_day(day_id)
            index = self._index_of(day, schedule_item_id)
            if index is None:
                logger.debug("Toggle ignored, item not found", day_id=day, schedule_item_id=schedule_item_id)
                return None

            current = self._schedule[day][index]
            updated = current.model_copy(update={"active": not current.active, "updated_at": utc_now()})
            self._schedule[day][index] = updated
            logger.info("Product status toggled", day_id=day, schedule_item_id=updated.id, active=updated.active)
            return updated.model_copy(deep=True)

        return self._run("toggle_product_status", operation, day_id=day_id)

    def copy_day_schedule(self, from_day_id: int, to_day_id: int, *, overwrite: bool = False) -> OperationResult:
        """Copy a day's items onto another day.

        With overwrite the target list is replaced by fresh copies (new ids,
        new added_at). Without it, copies are appended and products already on
        the target day are skipped; the outcome reports how many.
        """

        def operation() -> CopyDayOutcome:
            source = _require_day(from_day_id, "from_day_id")
            target = _require_day(to_day_id, "to_day_id")
            source_items = list(self._schedule[source])

            if overwrite:
                self._schedule.days[target] = [_copy_item(item) for item in source_items]
                outcome = CopyDayOutcome(copied=len(source_items))
            else:
                present = {item.product_id for item in self._schedule[target]}
                copies: list[ScheduleItem] = []
                skipped: list[ItemId] = []
                for item in source_items:
                    if item.product_id in present:
                        skipped.append(item.product_id)
                        continue
                    copies.append(_copy_item(item))
                    present.add(item.product_id)
                self._schedule[target].extend(copies)
                outcome = CopyDayOutcome(copied=len(copies), skipped=len(skipped), skipped_product_ids=skipped)

            logger.info(
                "Day schedule copied",
                from_day_id=source,
                to_day_id=target,
                overwrite=overwrite,
                copied=outcome.copied,
                skipped=outcome.skipped,
            )
            return outcome

        return self._run("copy_day_schedule", operation, from_day_id=from_day_id, to_day_id=to_day_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, day_id: int, schedule_item_id: ItemId) -> int | None:
        for index, item in enumerate(self._schedule[day_id]):
            if item.id == schedule_item_id:
                return index
        return None

    def _run(self, operation_name: str, operation: Callable[[], Any], **context: Any) -> OperationResult:
        try:
            return OperationResult.ok(operation())
        except HighlightsError as e:
            logger.warning(f"{operation_name} rejected", error_code=e.code, error=str(e), **context)
            return OperationResult.from_error(e)
