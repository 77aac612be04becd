#!/usr/bin/env python3
"""
PriceUSD Primitive Type

Immutable non-negative US dollar amount. The value is kept as a float, as in
the stored YAML, and is always displayed with exactly two decimal places.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_cents(value: float | Decimal) -> Decimal:
    """Round an amount half-up to cents, going through its shortest decimal form."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PriceUSD:
    """
    Non-negative price in US dollars.

    Examples:
        >>> str(PriceUSD.parse("10.3"))
        '10.30'
        >>> PriceUSD.parse("$1,250")
        PriceUSD(amount=1250.0)
    """

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValueError(f"Price must be a number, got {self.amount!r}")
        if not math.isfinite(self.amount):
            raise ValueError(f"Price must be finite, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"Price must not be negative, got {self.amount!r}")
        object.__setattr__(self, "amount", float(self.amount))

    @classmethod
    def parse(cls, text: str) -> "PriceUSD":
        """
        Parse a decimal numeral such as "10.3", "$12.34" or "1,200".

        Raises:
            ValueError: If the text is not a non-negative decimal number
        """
        cleaned = text.strip().replace(",", "")
        if cleaned.startswith("$"):
            cleaned = cleaned[1:]
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            raise ValueError(f"Not a valid price: {text!r}") from None
        if not value.is_finite():
            raise ValueError(f"Not a valid price: {text!r}")
        return cls(float(value))

    def to_decimal(self) -> Decimal:
        """Exact decimal value rounded to cents."""
        return to_cents(self.amount)

    def __mul__(self, quantity: float) -> float:
        return self.amount * quantity

    __rmul__ = __mul__

    def __str__(self) -> str:
        return str(self.to_decimal())
