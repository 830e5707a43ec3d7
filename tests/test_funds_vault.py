"""
Tests for `services/funds_vault.py` and `domain/treasury.py`.

Covers rules:
- Only the administrator may withdraw.
- Withdrawal moves the entire balance to the caller and resets it to zero.
- Withdrawing an empty treasury is a no-op that sends nothing.
- The balance can never go negative.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import ADMIN, BUYER
from domain.errors import Unauthorized
from domain.treasury import Treasury
from services.access_guard import SingleAdminGuard
from services.funds_vault import FundsVault, InMemoryPaymentRail


def _vault() -> tuple[FundsVault, InMemoryPaymentRail]:
    rail = InMemoryPaymentRail()
    return FundsVault(SingleAdminGuard(ADMIN), rail), rail


def test_treasury_invariants() -> None:
    with pytest.raises(ValueError):
        Treasury(balance=Decimal("-0.01"))

    treasury = Treasury().deposited(Decimal("0.08"))
    with pytest.raises(ValueError):
        treasury.deposited(Decimal("-0.08"))

    drained, amount = treasury.drained()
    assert amount == Decimal("0.08")
    assert drained.is_empty
    assert treasury.balance == Decimal("0.08")


def test_withdraw_requires_admin() -> None:
    vault, rail = _vault()
    vault.deposit(Decimal("0.8"))

    with pytest.raises(Unauthorized):
        vault.withdraw(BUYER)

    assert vault.balance == Decimal("0.8")
    assert rail.payouts == []


def test_withdraw_sends_entire_balance_to_admin() -> None:
    vault, rail = _vault()
    vault.deposit(Decimal("0.08"))
    vault.deposit(Decimal("1.52"))

    amount = vault.withdraw(ADMIN)

    assert amount == Decimal("1.60")
    assert vault.balance == Decimal("0")
    assert rail.balance_of(ADMIN) == Decimal("1.60")
    assert len(rail.payouts) == 1


def test_withdraw_is_idempotent_at_zero() -> None:
    """Verify two withdrawals in a row leave zero and send only one transfer."""

    vault, rail = _vault()
    vault.deposit(Decimal("0.16"))

    assert vault.withdraw(ADMIN) == Decimal("0.16")
    assert vault.withdraw(ADMIN) == Decimal("0")
    assert vault.balance == Decimal("0")
    assert len(rail.payouts) == 1


def test_withdraw_on_fresh_vault_sends_nothing() -> None:
    vault, rail = _vault()

    assert vault.withdraw(ADMIN) == Decimal("0")
    assert rail.payouts == []
