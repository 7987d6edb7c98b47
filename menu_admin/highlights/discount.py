"""Discount calculator - pure functions over a discount descriptor and a price.

Rules:
- Percentage discounts take value% of the base price
- Fixed discounts take min(value, base price)
- Final price is floored at zero and rounded half-up to cents
- Range checks (0-100%, fixed <= price) happen at apply time, not at
  descriptor creation, because the price lives elsewhere
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from menu_admin.config.settings import settings
from menu_admin.highlights.errors import DiscountExceedsPrice, InvalidDiscountRange, ValidationError
from menu_admin.highlights.money import HUNDRED, ZERO, Money, format_money, round_money, to_decimal
from menu_admin.highlights.results import DiscountValidation

DiscountType = Literal["percentage", "fixed"]

PERCENTAGE: DiscountType = "percentage"
FIXED: DiscountType = "fixed"

NO_DISCOUNT_LABEL = "Sem desconto"


class Discount(BaseModel):
    """Discount descriptor.

    Attributes:
        type: "percentage" (value is 0-100) or "fixed" (value is an amount)
        value: Discount value; bounds are checked by validate_discount()
    """

    model_config = ConfigDict(frozen=True)

    type: DiscountType = PERCENTAGE
    value: Money = ZERO


NO_DISCOUNT = Discount()


def coerce_discount(discount: Discount | dict | None) -> Discount:
    """Turn caller input into a Discount.

    None means "no discount" (0%).

    Raises:
        ValidationError: If the payload has an unknown type or a non-numeric value
    """
    if discount is None:
        return NO_DISCOUNT
    if isinstance(discount, Discount):
        return discount
    try:
        return Discount.model_validate(discount)
    except PydanticValidationError as e:
        first = e.errors()[0]
        raise ValidationError({"discount": f"Invalid discount: {first['msg']}"}) from e


def calculate_discount_amount(base_price: Decimal | float | int, discount: Discount | None) -> Decimal:
    """Amount taken off base_price (unrounded)."""
    price = to_decimal(base_price)
    if discount is None or discount.value <= 0:
        return ZERO
    if discount.type == PERCENTAGE:
        return price * discount.value / HUNDRED
    return min(discount.value, price)


def calculate_final_price(base_price: Decimal | float | int, discount: Discount | None) -> Decimal:
    """Price after discount, floored at zero and rounded to cents."""
    price = to_decimal(base_price)
    final = price - calculate_discount_amount(price, discount)
    return round_money(max(final, ZERO))


def discount_percentage(base_price: Decimal | float | int, discount: Discount | None) -> Decimal:
    """Effective discount as a percentage of base_price.

    Fixed discounts are normalised against the price; the result never exceeds 100.
    """
    price = to_decimal(base_price)
    if price <= 0:
        return ZERO
    amount = min(calculate_discount_amount(price, discount), price)
    return amount * HUNDRED / price


def ensure_valid_discount(discount: Discount | None, base_price: Decimal | float | int) -> None:
    """Check a discount against the price it will be applied to.

    Raises:
        InvalidDiscountRange: If value is negative or a percentage exceeds 100
        DiscountExceedsPrice: If a fixed value exceeds base_price
    """
    if discount is None:
        return
    if discount.value < 0:
        raise InvalidDiscountRange(f"Discount value must be >= 0, got {discount.value}")
    if discount.type == PERCENTAGE and discount.value > HUNDRED:
        raise InvalidDiscountRange(f"Percentage discount must be between 0 and 100, got {discount.value}")
    price = to_decimal(base_price)
    if discount.type == FIXED and discount.value > price:
        raise DiscountExceedsPrice(f"Fixed discount ({discount.value}) exceeds the product price ({price})")


def validate_discount(discount: Discount | None, base_price: Decimal | float | int) -> DiscountValidation:
    """Non-raising form of ensure_valid_discount()."""
    try:
        ensure_valid_discount(discount, base_price)
    except (InvalidDiscountRange, DiscountExceedsPrice) as e:
        return DiscountValidation(is_valid=False, error=str(e), error_code=e.code)
    return DiscountValidation(is_valid=True)


def format_discount(discount: Discount | None, currency_symbol: str | None = None) -> str:
    """Display label: "15% OFF", "R$ 5,00 OFF", or "Sem desconto"."""
    if discount is None or discount.value <= 0:
        return NO_DISCOUNT_LABEL
    if discount.type == PERCENTAGE:
        return f"{discount.value.normalize():f}% OFF"
    return f"{format_money(discount.value, currency_symbol or settings.currency_symbol)} OFF"
