"""
Pricing policy for public mints.

Every item costs the same immutable unit price. The payment for a request of
`quantity` items must equal unit_price * quantity exactly: overpayment and
underpayment are both rejected, so no refund bookkeeping is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from domain.errors import IncorrectPayment
from domain.money import AmountLike, exact_multiply, require_non_negative, to_amount
from domain.supply import require_positive_quantity


@dataclass(frozen=True, slots=True)
class MintQuote:
    """
    Price breakdown for a mint request.

    Includes:
    - Unit price and quantity
    - Total (the exact amount the payment must match)
    """
    quantity: int
    unit_price: Decimal
    total: Decimal
    currency: str


class PricingPolicy:
    def __init__(self, unit_price: Decimal, currency: str = "ETH"):
        require_non_negative("unit_price", unit_price)
        self._unit_price = unit_price
        self._currency = currency

    @property
    def unit_price(self) -> Decimal:
        return self._unit_price

    @property
    def currency(self) -> str:
        return self._currency

    def required_payment(self, quantity: int) -> Decimal:
        require_positive_quantity("quantity", quantity)
        return exact_multiply(self._unit_price, quantity)

    def quote(self, quantity: int) -> MintQuote:
        """
        Calculate the exact payment for `quantity` items.

        Example:
            quote = PricingPolicy(Decimal("0.08")).quote(19)
            # quote.total == Decimal("1.52")
        """
        return MintQuote(
            quantity=quantity,
            unit_price=self._unit_price,
            total=self.required_payment(quantity),
            currency=self._currency,
        )

    def validate(self, quantity: int, payment: AmountLike) -> Decimal:
        """
        Check that `payment` matches the required amount exactly.

        Returns:
            The payment as a Decimal

        Raises:
            IncorrectPayment: if payment != unit_price * quantity
        """
        amount = to_amount("payment", payment)
        expected = self.required_payment(quantity)
        if amount != expected:
            raise IncorrectPayment(expected=expected, received=amount)
        return amount


__all__ = ["MintQuote", "PricingPolicy"]
