"""Error types for the highlights core.

Every error here is recoverable: the mutation that raised it is rejected and
prior state is retained. Stores convert these into OperationResult values at
their public boundary.
"""


class HighlightsError(Exception):
    """Base exception for highlights errors.

    Attributes:
        code: Stable machine-readable error code
    """

    code = "HighlightsError"


class ValidationError(HighlightsError):
    """Raised when field-level validation fails.

    Attributes:
        errors: Mapping of field name to human-readable message
    """

    code = "ValidationError"

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Validation failed: {detail}")


class InvalidDayError(ValidationError):
    """Raised when a day id is outside 0-6."""

    code = "InvalidDay"

    def __init__(self, day_id: object, field: str = "day_id") -> None:
        self.day_id = day_id
        super().__init__({field: f"Invalid day id: {day_id}. Must be an integer in 0-6"})


class DuplicateProductInDay(HighlightsError):
    """Raised when a product is already scheduled on the target day."""

    code = "DuplicateProductInDay"

    def __init__(self, day_id: int, product_id: int | str) -> None:
        self.day_id = day_id
        self.product_id = product_id
        super().__init__(f"Product {product_id} is already scheduled on day {day_id}")


class InvalidDiscountRange(HighlightsError):
    """Raised when a discount value is negative or a percentage exceeds 100."""

    code = "InvalidDiscountRange"


class DiscountExceedsPrice(HighlightsError):
    """Raised when a fixed discount is larger than the price it applies to."""

    code = "DiscountExceedsPrice"


class SnapshotError(HighlightsError):
    """Raised when a saved session snapshot cannot be parsed."""

    code = "SnapshotError"
