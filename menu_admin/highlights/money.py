"""Money helpers - Decimal only, rounded half-up to cents.

Floats never take part in price arithmetic; they are converted through their
string form so that 35.90 stays Decimal("35.9") instead of its binary neighbour.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: object) -> Decimal:
    """Convert a numeric value to Decimal.

    Raises:
        ValueError: If value is not numeric (bools are rejected)
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Expected a number, got {value!r}") from e
    raise ValueError(f"Expected a number, got {value!r}")


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half-up (30.515 -> 30.52)."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal, currency_symbol: str = "R$") -> str:
    """Format an amount with pt-BR separators, e.g. 1234.5 -> "R$ 1.234,50"."""
    text = f"{round_money(to_decimal(value)):,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{currency_symbol} {text}"


def _coerce_money(value: object) -> object:
    if isinstance(value, float):
        return Decimal(str(value))
    return value


# Decimal in Python, plain number in JSON
Money = Annotated[
    Decimal,
    BeforeValidator(_coerce_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]
