"""Money value object with currency"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency:
            raise ValueError("Currency required")

    def to_cents(self) -> int:
        return int((self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @classmethod
    def from_cents(cls, cents: int, currency: str = "USD") -> "Money":
        return cls(amount=Decimal(cents) / 100, currency=currency)

    @classmethod
    def from_amount(cls, amount: float, currency: str = "USD") -> "Money":
        return cls(amount=Decimal(str(amount)), currency=currency)

    def __add__(self, other: "Money") -> "Money":
        if other.currency != self.currency:
            raise ValueError("Cannot add amounts in different currencies")
        return Money(self.amount + other.amount, self.currency)

    def times(self, quantity: int) -> "Money":
        return Money(self.amount * quantity, self.currency)

    def percent(self, rate: float) -> "Money":
        """Rate applied to this amount, rounded to whole cents."""
        cents = (Decimal(self.to_cents()) * Decimal(str(rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return Money.from_cents(int(cents), self.currency)

    def __float__(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
