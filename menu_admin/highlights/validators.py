"""Validation engine for highlights data.

Stateless rules shared by the configuration store, the schedule store and the
related section CRUD flows:
- Title: required, 3-50 chars, unique (case-insensitive) among siblings
- Description: optional, <= 200 chars
- Order: integer in [1, 100], unique among siblings
- Discount: 0-100% for percentages, <= price for fixed amounts

Each rule returns a ValidationResult; callers merge them and abort the whole
mutation on any failure.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from menu_admin.highlights.discount import Discount, validate_discount
from menu_admin.highlights.results import ValidationResult

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200
ORDER_MIN = 1
ORDER_MAX = 100

_MISSING = object()


def _get(entity: Any, name: str, default: Any = None) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(name, default)
    return getattr(entity, name, default)


def merge_results(*results: ValidationResult) -> ValidationResult:
    """Merge several results; the first message per field wins."""
    errors: dict[str, str] = {}
    for result in results:
        for field, message in result.errors.items():
            errors.setdefault(field, message)
    return ValidationResult.from_errors(errors)


def validate_unique_title(title: str, current_id: Any, existing: Iterable[Any]) -> ValidationResult:
    """Title must not match another entity's title, ignoring case.

    Args:
        title: Candidate title
        current_id: Id of the entity being edited (excluded), None when creating
        existing: Sibling entities (objects or mappings with id/title)
    """
    candidate = title.strip().casefold()
    for entity in existing:
        if current_id is not None and _get(entity, "id") == current_id:
            continue
        other = _get(entity, "title")
        if isinstance(other, str) and other.strip().casefold() == candidate:
            return ValidationResult.from_errors({"title": "A section with this title already exists"})
    return ValidationResult()


def validate_title(
    title: Any,
    *,
    existing: Iterable[Any] = (),
    current_id: Any = None,
) -> ValidationResult:
    if title is None or (isinstance(title, str) and not title.strip()):
        return ValidationResult.from_errors({"title": "Title is required"})
    if not isinstance(title, str):
        return ValidationResult.from_errors({"title": "Title must be text"})

    length = len(title.strip())
    if length < TITLE_MIN_LENGTH:
        return ValidationResult.from_errors({"title": f"Title must have at least {TITLE_MIN_LENGTH} characters"})
    if length > TITLE_MAX_LENGTH:
        return ValidationResult.from_errors({"title": f"Title must have at most {TITLE_MAX_LENGTH} characters"})

    return validate_unique_title(title, current_id, existing)


def validate_description(description: Any) -> ValidationResult:
    if description is None:
        return ValidationResult()
    if not isinstance(description, str):
        return ValidationResult.from_errors({"description": "Description must be text"})
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return ValidationResult.from_errors(
            {"description": f"Description must have at most {DESCRIPTION_MAX_LENGTH} characters"}
        )
    return ValidationResult()


def validate_unique_order(order: int, current_id: Any, existing: Iterable[Any]) -> ValidationResult:
    for entity in existing:
        if current_id is not None and _get(entity, "id") == current_id:
            continue
        if _get(entity, "order") == order:
            return ValidationResult.from_errors({"order": "A section with this order already exists"})
    return ValidationResult()


def validate_order(
    order: Any,
    *,
    existing: Iterable[Any] = (),
    current_id: Any = None,
) -> ValidationResult:
    """Order is optional; when present it must be an integer in [1, 100] and unique."""
    if order is None:
        return ValidationResult()
    if isinstance(order, bool) or not isinstance(order, int):
        return ValidationResult.from_errors({"order": "Order must be an integer"})
    if order < ORDER_MIN or order > ORDER_MAX:
        return ValidationResult.from_errors({"order": f"Order must be between {ORDER_MIN} and {ORDER_MAX}"})
    return validate_unique_order(order, current_id, existing)


def check_discount(discount: Discount | None, base_price: Decimal | float | int) -> ValidationResult:
    """Discount rule in field-map form (see discount.validate_discount)."""
    outcome = validate_discount(discount, base_price)
    if outcome.is_valid:
        return ValidationResult()
    return ValidationResult.from_errors({"discount": outcome.error or "Invalid discount"})


def validate_active_flag(active: Any) -> ValidationResult:
    if isinstance(active, bool):
        return ValidationResult()
    return ValidationResult.from_errors({"active": "Active must be true or false"})


def validate_config_fields(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a complete highlights configuration record."""
    results = [
        validate_title(data.get("title")),
        validate_description(data.get("description")),
    ]
    if "active" in data:
        results.append(validate_active_flag(data["active"]))
    return merge_results(*results)


def validate_section(data: Mapping[str, Any], existing: Iterable[Any] = ()) -> ValidationResult:
    """Validate a highlight section payload from the section CRUD flows.

    Args:
        data: Section payload (title, description, order, products, id when editing)
        existing: Sibling sections used for title/order uniqueness
    """
    siblings = list(existing)
    current_id = data.get("id")
    results = [
        validate_title(data.get("title"), existing=siblings, current_id=current_id),
        validate_description(data.get("description")),
        validate_order(data.get("order"), existing=siblings, current_id=current_id),
    ]

    products = data.get("products", _MISSING)
    if products is not _MISSING and products is not None and len(products) == 0:
        results.append(ValidationResult.from_errors({"products": "A section must have at least one product"}))

    return merge_results(*results)
