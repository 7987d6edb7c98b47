"""Structured results returned across the store boundary.

Stores never let a HighlightsError escape to the presentation layer; they
return one of these instead so inline messages can be shown without losing
other UI state.
"""

from dataclasses import dataclass, field
from typing import Any

from menu_admin.highlights.errors import HighlightsError, ValidationError


@dataclass
class OperationResult:
    """Outcome of a store mutation.

    Attributes:
        success: True iff the mutation was applied (or was a permitted no-op)
        data: Operation payload (created item, updated config, copy outcome...)
        error: Human-readable error message on failure
        error_code: Stable error code on failure (see errors.py)
        errors: Field -> message map for validation failures
    """

    success: bool
    data: Any = None
    error: str | None = None
    error_code: str | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def from_error(cls, error: HighlightsError) -> "OperationResult":
        errors = error.errors if isinstance(error, ValidationError) else {}
        return cls(success=False, error=str(error), error_code=error.code, errors=dict(errors))


@dataclass
class ValidationResult:
    """Outcome of a validation rule (or of several, merged)."""

    is_valid: bool = True
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=dict(errors))

    def raise_for_errors(self) -> None:
        """Raise ValidationError carrying the field map if any rule failed."""
        if not self.is_valid:
            raise ValidationError(self.errors)


@dataclass
class DiscountValidation:
    """Outcome of validate_discount()."""

    is_valid: bool
    error: str | None = None
    error_code: str | None = None


@dataclass
class CopyDayOutcome:
    """What copy_day_schedule() did.

    Attributes:
        copied: Number of items written to the target day
        skipped: Number of source items skipped as duplicates (append mode only)
        skipped_product_ids: Product ids that were skipped
    """

    copied: int
    skipped: int = 0
    skipped_product_ids: list[int | str] = field(default_factory=list)
