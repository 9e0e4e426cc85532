"""
Money value object

Represents monetary amounts with currency handling.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from storefront.infrastructure.utilities.constants import PricingSettings

_DISPLAY_QUANTUM = Decimal(PricingSettings.DISPLAY_DECIMAL_PLACES)


@dataclass(frozen=True)
class Money:
    """
    Money value object that keeps the exact decimal amount.

    Amounts are never rounded on construction or arithmetic, so repeated
    add/remove/update cycles cannot drift. Rounding to cents happens only in
    ``rounded()`` and ``format_display()``.
    """

    amount: Decimal
    currency: str = PricingSettings.DEFAULT_CURRENCY

    def __post_init__(self):
        """Validate money object on creation"""
        if isinstance(self.amount, bool):
            raise ValueError("Money amount must be numeric")
        if not isinstance(self.amount, Decimal):
            # Floats go through str() so 9.99 stays 9.99
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")

        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter code")

        object.__setattr__(self, 'currency', self.currency.upper())

    @classmethod
    def from_float(cls, amount: float, currency: str = PricingSettings.DEFAULT_CURRENCY) -> 'Money':
        """Create Money from float amount"""
        return cls(Decimal(str(amount)), currency)

    @classmethod
    def zero(cls, currency: str = PricingSettings.DEFAULT_CURRENCY) -> 'Money':
        """Create zero money amount"""
        return cls(Decimal('0'), currency)

    def _check_currency(self, other: 'Money', operation: str) -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot {operation} different currencies: {self.currency} and {other.currency}"
            )

    def add(self, other: 'Money') -> 'Money':
        """Add two money amounts"""
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        """Subtract two money amounts"""
        self._check_currency(other, "subtract")
        result_amount = self.amount - other.amount
        if result_amount < 0:
            raise ValueError("Cannot have negative money amount")
        return Money(result_amount, self.currency)

    def multiply(self, factor: Union[int, Decimal]) -> 'Money':
        """Multiply money by a factor"""
        if not isinstance(factor, Decimal):
            factor = Decimal(str(factor))
        if factor < 0:
            raise ValueError("Cannot multiply money by negative factor")
        return Money(self.amount * factor, self.currency)

    def percentage(self, percent: Union[int, Decimal]) -> 'Money':
        """Return ``percent`` percent of this amount"""
        return self.multiply(Decimal(str(percent)) / Decimal(100))

    def min(self, other: 'Money') -> 'Money':
        """Return the smaller of two amounts"""
        return self if self <= other else other

    def is_zero(self) -> bool:
        """Check if amount is zero"""
        return self.amount == Decimal('0')

    def rounded(self) -> Decimal:
        """Amount rounded to cents for presentation"""
        return self.amount.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)

    def format_display(self) -> str:
        """Format for display to users"""
        return f"{self.rounded():.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format_display()

    def __repr__(self) -> str:
        return f"Money(amount={self.amount}, currency='{self.currency}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money amounts using + operator"""
        return self.add(other)

    def __sub__(self, other: 'Money') -> 'Money':
        """Subtract two money amounts using - operator"""
        return self.subtract(other)

    def __mul__(self, factor: Union[int, Decimal]) -> 'Money':
        """Multiply money by a factor using * operator"""
        return self.multiply(factor)

    def __rmul__(self, factor: Union[int, Decimal]) -> 'Money':
        """Reverse multiply for factor * money"""
        return self.multiply(factor)
