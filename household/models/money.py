"""
Money and Currency Models

Money is an amount in one of a closed set of currencies.

DESIGN DECISION: Exchange rates are a fixed table relative to USD.
There is no live rate lookup and no rounding policy - amounts are
plain floats and arithmetic is plain float arithmetic.

Mixed-currency arithmetic follows the "leftmost currency" rule:
the result is expressed in the currency of the first operand and
every other operand is converted into it before combining.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from household.models.errors import InvalidArgumentError


class Currency(str, Enum):
    """Supported currencies."""
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAN = "CAN"

    def money(self, amount: float) -> "Money":
        """Build a Money of `amount` in this currency, e.g. Currency.GBP.money(10)."""
        return Money(amount=amount, currency=self)


# Units of each currency worth 1 USD.
EXCHANGE_RATES: dict[Currency, float] = {
    Currency.USD: 1.0,
    Currency.GBP: 0.5,
    Currency.EUR: 1.5,
    Currency.CAN: 1.25,
}


class Money(BaseModel):
    """
    A monetary amount with its currency.

    Money values are treated as values: every operation returns a new
    Money. The one exception is `amount`, which a holder may reassign
    in place (Job.raise_salary does this to its own salary).
    """
    model_config = ConfigDict(validate_assignment=True)

    amount: float = Field(
        ...,
        description="Signed amount; negative values result from subtraction"
    )
    currency: Currency = Field(
        ...,
        description="Currency the amount is expressed in"
    )

    def convert(self, to: Currency) -> "Money":
        """
        Convert to another currency through USD.

        new_amount = amount * (1 / rate[source]) * rate[target]
        """
        converted = self.amount * (1 / EXCHANGE_RATES[self.currency]) * EXCHANGE_RATES[to]
        return Money(amount=converted, currency=to)

    def _amount_in(self, currency: Currency) -> float:
        # Same currency skips conversion to avoid float noise.
        if self.currency == currency:
            return self.amount
        return self.convert(currency).amount

    @classmethod
    def add(cls, *moneys: "Money") -> "Money":
        """
        Sum any number of Money values in the leftmost currency.

        Raises:
            InvalidArgumentError: If called without operands.
        """
        if not moneys:
            raise InvalidArgumentError("Money.add requires at least one operand")

        currency = moneys[0].currency
        total = 0.0
        for money in moneys:
            total += money._amount_in(currency)
        return cls(amount=total, currency=currency)

    @classmethod
    def subtract(cls, *moneys: "Money") -> "Money":
        """
        Subtract every following operand from the first one.

        The result is in the first operand's currency. A single operand
        comes back as an equal Money.

        Raises:
            InvalidArgumentError: If called without operands.
        """
        if not moneys:
            raise InvalidArgumentError("Money.subtract requires at least one operand")

        first, rest = moneys[0], moneys[1:]
        total = first.amount
        for money in rest:
            total -= money._amount_in(first.currency)
        return cls(amount=total, currency=first.currency)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money.subtract(self, other)

    # Both renderings are used by callers and are kept distinct.
    @property
    def stringified(self) -> str:
        """Amount first: '20.0 USD'."""
        return f"{self.amount} {self.currency.value}"

    @property
    def description(self) -> str:
        """Code first: 'USD20.0'."""
        return f"{self.currency.value}{self.amount}"

    def __str__(self) -> str:
        return self.description
