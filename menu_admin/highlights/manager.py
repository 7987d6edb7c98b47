"""Highlights manager - one admin session of the weekly highlights feature.

Wires the dialog coordinator, catalog filter, schedule store and config store
into the admin flow: a dialog is opened with a target, the picker supplies
candidates, and confirming runs validation and pricing before committing.
"""

from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path
from typing import Any

from loguru import logger

from menu_admin.highlights.catalog import ProductCatalogFilter
from menu_admin.highlights.config_store import HighlightsConfigStore
from menu_admin.highlights.dialogs import DialogCoordinator, DialogName
from menu_admin.highlights.discount import Discount
from menu_admin.highlights.errors import ValidationError
from menu_admin.highlights.persistence import (
    HighlightsSnapshot,
    apply_snapshot,
    build_snapshot,
    read_snapshot,
    save_snapshot,
)
from menu_admin.highlights.results import OperationResult
from menu_admin.highlights.schedule import WeeklyScheduleStore
from menu_admin.highlights.types import ItemId, Product, ScheduleItem, ScheduleStatistics
from menu_admin.highlights.weekdays import weekday_for_date


def _missing_selection(field: str, message: str) -> OperationResult:
    return OperationResult.from_error(ValidationError({field: message}))


class HighlightsManager:
    """Admin session facade over the highlights stores."""

    def __init__(
        self,
        products: Iterable[Product | dict] = (),
        *,
        config_store: HighlightsConfigStore | None = None,
        schedule_store: WeeklyScheduleStore | None = None,
    ) -> None:
        self.config_store = config_store or HighlightsConfigStore()
        self.schedule_store = schedule_store or WeeklyScheduleStore()
        self.catalog = ProductCatalogFilter(products)
        self.dialogs = DialogCoordinator()

    @property
    def statistics(self) -> ScheduleStatistics:
        return self.schedule_store.statistics

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def open_config(self) -> None:
        self.dialogs.open_dialog(DialogName.CONFIG, {"config": self.config_store.config})

    def save_config(self, partial: Mapping[str, Any]) -> OperationResult:
        result = self.config_store.update_config(partial)
        if result.success:
            self.dialogs.close_dialog(DialogName.CONFIG)
        return result

    # ------------------------------------------------------------------
    # Schedule flows
    # ------------------------------------------------------------------

    def start_add_product(self, day_id: int) -> None:
        self.catalog.clear_filters()
        self.dialogs.open_dialog(DialogName.ADD_PRODUCT, {"dayId": day_id})

    def confirm_add_product(self, product: Product | dict, discount: Discount | dict | None = None) -> OperationResult:
        day_id = self.dialogs.selected_data["dayId"]
        if day_id is None:
            return _missing_selection("day_id", "No day selected")
        result = self.schedule_store.add_product_to_day(day_id, product, discount)
        if result.success:
            self.dialogs.close_dialog(DialogName.ADD_PRODUCT)
        return result

    def start_edit_discount(self, day_id: int, schedule_item_id: ItemId) -> bool:
        """Open the discount editor for an item; False if the item is gone."""
        item = self.schedule_store.find_item(day_id, schedule_item_id)
        if item is None:
            return False
        self.dialogs.open_dialog(DialogName.EDIT_DISCOUNT, {"scheduleItem": item, "dayId": day_id})
        return True

    def confirm_edit_discount(self, discount: Discount | dict) -> OperationResult:
        selected = self.dialogs.selected_data
        item: ScheduleItem | None = selected["scheduleItem"]
        if item is None or selected["dayId"] is None:
            return _missing_selection("schedule_item", "No schedule item selected")
        result = self.schedule_store.update_product_discount(selected["dayId"], item.id, discount)
        if result.success:
            self.dialogs.close_dialog(DialogName.EDIT_DISCOUNT)
        return result

    def start_delete(self, day_id: int, schedule_item_id: ItemId) -> None:
        self.dialogs.open_dialog(DialogName.DELETE, {"deleteId": schedule_item_id, "dayId": day_id})

    def confirm_delete(self) -> OperationResult:
        selected = self.dialogs.selected_data
        if selected["deleteId"] is None or selected["dayId"] is None:
            return _missing_selection("schedule_item", "No schedule item selected")
        result = self.schedule_store.remove_product_from_day(selected["dayId"], selected["deleteId"])
        self.dialogs.close_dialog(DialogName.DELETE)
        return result

    def start_copy_day(self, from_day_id: int, to_day_id: int) -> None:
        self.dialogs.open_dialog(DialogName.COPY_DAY, {"copyFromDay": from_day_id, "copyToDay": to_day_id})

    def confirm_copy_day(self, *, overwrite: bool = False) -> OperationResult:
        selected = self.dialogs.selected_data
        if selected["copyFromDay"] is None or selected["copyToDay"] is None:
            return _missing_selection("copy_day", "Source and target days are required")
        result = self.schedule_store.copy_day_schedule(selected["copyFromDay"], selected["copyToDay"], overwrite=overwrite)
        if result.success:
            self.dialogs.close_dialog(DialogName.COPY_DAY)
        return result

    def toggle_product_status(self, day_id: int, schedule_item_id: ItemId) -> OperationResult:
        return self.schedule_store.toggle_product_status(day_id, schedule_item_id)

    # ------------------------------------------------------------------
    # Public menu
    # ------------------------------------------------------------------

    def todays_highlights(self, on: date | None = None) -> list[ScheduleItem]:
        """Active items for the weekday of `on` (default today).

        Empty while the highlights feature is switched off.
        """
        if not self.config_store.is_active:
            return []
        return self.schedule_store.get_active_items(weekday_for_date(on or date.today()))

    # ------------------------------------------------------------------
    # Session boundaries
    # ------------------------------------------------------------------

    def snapshot(self) -> HighlightsSnapshot:
        return build_snapshot(self.config_store, self.schedule_store)

    def save(self, path: str | Path | None = None) -> Path:
        return save_snapshot(self.snapshot(), path)

    def restore(self, path: str | Path | None = None) -> bool:
        """Load the last saved session; False (defaults kept) if none exists."""
        snapshot = read_snapshot(path)
        if snapshot is None:
            return False
        apply_snapshot(snapshot, self.config_store, self.schedule_store)
        self.dialogs.close_all_dialogs()
        logger.info("Highlights session restored", total_products=self.statistics.total_products)
        return True
