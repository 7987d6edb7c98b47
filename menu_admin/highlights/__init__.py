"""Weekly highlights - products scheduled per weekday with discounts.

This module provides:
- Discount calculator (percentage or fixed, rounded to cents)
- Product catalog filter for the add-product picker
- Weekly schedule store with derived statistics
- Highlights configuration store
- Validation rules shared by the stores
- Dialog/selection coordinator
- Snapshot persistence and the session manager
"""

from menu_admin.highlights.catalog import CatalogFilterState, ProductCatalogFilter
from menu_admin.highlights.config_store import HighlightsConfigStore
from menu_admin.highlights.dialogs import DialogCoordinator, DialogIntent, DialogName
from menu_admin.highlights.discount import (
    Discount,
    calculate_discount_amount,
    calculate_final_price,
    format_discount,
    validate_discount,
)
from menu_admin.highlights.errors import (
    DiscountExceedsPrice,
    DuplicateProductInDay,
    HighlightsError,
    InvalidDayError,
    InvalidDiscountRange,
    SnapshotError,
    ValidationError,
)
from menu_admin.highlights.manager import HighlightsManager
from menu_admin.highlights.results import CopyDayOutcome, OperationResult, ValidationResult
from menu_admin.highlights.schedule import WeeklyScheduleStore
from menu_admin.highlights.statistics import compute_statistics
from menu_admin.highlights.types import HighlightsConfig, Product, ScheduleItem, ScheduleStatistics, WeeklySchedule
from menu_admin.highlights.weekdays import WEEKDAYS, WeekDay, get_weekday

__all__ = [
    "WEEKDAYS",
    "CatalogFilterState",
    "CopyDayOutcome",
    "DialogCoordinator",
    "DialogIntent",
    "DialogName",
    "Discount",
    "DiscountExceedsPrice",
    "DuplicateProductInDay",
    "HighlightsConfig",
    "HighlightsConfigStore",
    "HighlightsError",
    "HighlightsManager",
    "InvalidDayError",
    "InvalidDiscountRange",
    "OperationResult",
    "Product",
    "ProductCatalogFilter",
    "ScheduleItem",
    "ScheduleStatistics",
    "SnapshotError",
    "ValidationError",
    "ValidationResult",
    "WeekDay",
    "WeeklySchedule",
    "WeeklyScheduleStore",
    "calculate_discount_amount",
    "calculate_final_price",
    "compute_statistics",
    "format_discount",
    "get_weekday",
    "validate_discount",
]
