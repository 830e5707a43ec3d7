"""
Tests for `services/pricing_service.py` and `domain/money.py`.

Covers rules:
- Required payment is unit_price * quantity in exact fixed point.
- Both overpayment and underpayment are rejected.
- Floats are refused as amounts.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from domain.errors import IncorrectPayment
from domain.money import exact_add, exact_multiply, to_amount
from domain.treasury import Treasury
from services.pricing_service import PricingPolicy


def test_required_payment_is_exact() -> None:
    policy = PricingPolicy(Decimal("0.08"))

    assert policy.required_payment(1) == Decimal("0.08")
    assert policy.required_payment(19) == Decimal("1.52")
    assert policy.required_payment(20) == Decimal("1.60")


def test_quote_carries_total_and_currency() -> None:
    quote = PricingPolicy(Decimal("0.08"), "ETH").quote(3)

    assert quote.quantity == 3
    assert quote.unit_price == Decimal("0.08")
    assert quote.total == Decimal("0.24")
    assert quote.currency == "ETH"


def test_validate_accepts_equal_amount_in_any_representation() -> None:
    policy = PricingPolicy(Decimal("0.08"))

    assert policy.validate(19, Decimal("1.52")) == Decimal("1.52")
    assert policy.validate(19, "1.520") == Decimal("1.52")
    assert policy.validate(25, 2) == Decimal("2")


@pytest.mark.parametrize("payment", ["0", "1.51", "1.53", "15.2", "-1.52"])
def test_validate_rejects_any_other_amount(payment: str) -> None:
    policy = PricingPolicy(Decimal("0.08"))

    with pytest.raises(IncorrectPayment) as exc_info:
        policy.validate(19, payment)

    assert exc_info.value.expected == Decimal("1.52")
    assert exc_info.value.received == Decimal(payment)


def test_free_collection_requires_zero_payment() -> None:
    policy = PricingPolicy(Decimal("0"))

    assert policy.validate(5, 0) == Decimal("0")
    with pytest.raises(IncorrectPayment):
        policy.validate(5, "0.01")


def test_negative_unit_price_rejected() -> None:
    with pytest.raises(ValueError):
        PricingPolicy(Decimal("-0.08"))


def test_to_amount_refuses_floats_and_garbage() -> None:
    with pytest.raises(TypeError):
        to_amount("payment", 0.08)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        to_amount("payment", True)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        to_amount("payment", "abc")
    with pytest.raises(ValueError):
        to_amount("payment", "NaN")


def test_high_precision_price_is_not_rounded() -> None:
    """Verify prices beyond 28 significant digits keep their exact totals."""

    policy = PricingPolicy(Decimal("0.080000000000000000000000000001"))

    assert policy.required_payment(3) == Decimal("0.240000000000000000000000000003")
    assert policy.validate(3, "0.240000000000000000000000000003") == Decimal(
        "0.240000000000000000000000000003"
    )

    with pytest.raises(IncorrectPayment):
        policy.validate(3, "0.24")


def test_treasury_deposits_keep_full_precision() -> None:
    treasury = Treasury(Decimal("1000000000000000000000000000000"))

    treasury = treasury.deposited(Decimal("0.000000000000000000000000000001"))

    assert treasury.balance == Decimal("1000000000000000000000000000000.000000000000000000000000000001")


def test_exact_helpers_match_plain_arithmetic_for_small_amounts() -> None:
    assert exact_multiply(Decimal("0.08"), 19) == Decimal("1.52")
    assert exact_add(Decimal("0.16"), Decimal("1.52")) == Decimal("1.68")
