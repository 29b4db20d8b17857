"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

MAX_PRICE = Decimal("999999.99")
_CENTS = Decimal("0.01")


def quantize_price(amount: Decimal) -> Decimal:
    """Round an amount to two decimal places, half up.

    Amounts too large to quantize are returned unchanged; the range
    checks reject them anyway.
    """
    try:
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return amount


def parse_decimal(value: object) -> Decimal | None:
    """Parse *value* as a finite Decimal, or return None."""
    if isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


@dataclass(frozen=True)
class Price:
    """Product price in the catalog currency.

    Uses Decimal to avoid floating-point rounding errors. Always held
    with exactly two decimal places and within ``(0, 999999.99]``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        # Rounded before the range check so 0.004 is rejected as zero.
        object.__setattr__(self, "amount", quantize_price(self.amount))
        if self.amount <= Decimal("0"):
            raise ValidationError("Price must be greater than zero")
        if self.amount > MAX_PRICE:
            raise ValidationError(f"Price must not exceed {MAX_PRICE}")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:,.2f}"

    def __float__(self) -> float:
        return float(self.amount)
