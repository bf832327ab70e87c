"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pricing.domain.exceptions import InvalidDiscountError, ValidationError

_HUNDRED = Decimal("100")


def _to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a number to Decimal going through str, so 0.1 stays 0.1."""
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers here")
    return Decimal(str(value))


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(_to_decimal(amount), currency)
        except (InvalidOperation, ValueError, TypeError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Discount:
    """A percentage reduction between 0 and 100 inclusive."""

    percentage: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.percentage, Decimal) or not self.percentage.is_finite():
            raise InvalidDiscountError("Discount percentage must be between 0 and 100.")
        if self.percentage < Decimal("0") or self.percentage > _HUNDRED:
            raise InvalidDiscountError("Discount percentage must be between 0 and 100.")

    def apply(self, price: Money) -> Money:
        """Return ``price`` reduced by this percentage.

        The factor is computed in Decimal so a 10% discount on 100 is
        exactly 90, and 100% yields zero.
        """
        factor = Decimal("1") - self.percentage / _HUNDRED
        return Money(price.amount * factor, price.currency)

    def __str__(self) -> str:
        return f"{self.percentage}%"

    @staticmethod
    def of(percentage: str | float | int | Decimal) -> Discount:
        try:
            return Discount(_to_decimal(percentage))
        except (InvalidOperation, ValueError, TypeError) as exc:
            raise InvalidDiscountError(
                "Discount percentage must be between 0 and 100."
            ) from exc
