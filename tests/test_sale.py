"""
Tests for `domain/sale.py` and `services/sale_controller.py`.

Covers rules:
- Sale starts Inactive; only the administrator can change the phase.
- Mint validation order: SaleInactive, BatchSizeExceeded, IncorrectPayment, SupplyExceeded.
- Failed mints leave supply, treasury and ownership untouched.
- Successful mints deposit the exact payment.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from conftest import ADMIN, BUYER, PRICE
from domain.errors import (
    BatchSizeExceeded,
    IncorrectPayment,
    SaleInactive,
    SupplyExceeded,
    Unauthorized,
)
from domain.sale import MintReceipt, SalePhase, SaleState
from services.access_guard import SingleAdminGuard
from services.funds_vault import FundsVault, InMemoryPaymentRail
from services.item_registry import InMemoryItemRegistry
from services.pricing_service import PricingPolicy
from services.sale_controller import SaleController
from services.supply_ledger import SupplyLedger


def _build(max_supply: int = 25) -> tuple[SaleController, SupplyLedger, FundsVault]:
    guard = SingleAdminGuard(ADMIN)
    supply = SupplyLedger(max_supply, InMemoryItemRegistry())
    vault = FundsVault(guard, InMemoryPaymentRail())
    controller = SaleController(guard, PricingPolicy(PRICE), supply, vault, max_batch_size=20)
    return controller, supply, vault


def _controller(max_supply: int = 25) -> SaleController:
    return _build(max_supply)[0]


def test_sale_state_defaults_and_flip() -> None:
    state = SaleState()

    assert state.active is False
    assert state.max_batch_size == 20
    assert state.phase is SalePhase.INACTIVE
    assert state.flipped().phase is SalePhase.ACTIVE
    assert state.flipped().flipped() == state


def test_sale_state_quantity_window() -> None:
    state = SaleState(max_batch_size=20)

    assert state.accepts_quantity(1)
    assert state.accepts_quantity(20)
    assert not state.accepts_quantity(0)
    assert not state.accepts_quantity(21)
    assert not state.accepts_quantity(-1)


def test_mint_receipt_requires_utc_and_is_immutable() -> None:
    with pytest.raises(ValueError):
        MintReceipt(recipient=BUYER, item_ids=(0,), amount_paid=PRICE, minted_at=datetime(2025, 1, 1))

    with pytest.raises(ValueError):
        MintReceipt(
            recipient=BUYER,
            item_ids=(0,),
            amount_paid=PRICE,
            minted_at=datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=2))),
        )

    receipt = MintReceipt(
        recipient=BUYER,
        item_ids=(0, 1),
        amount_paid=PRICE * 2,
        minted_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    assert receipt.quantity == 2
    with pytest.raises(FrozenInstanceError):
        receipt.recipient = ADMIN  # type: ignore[misc]


def test_set_active_requires_admin() -> None:
    controller = _controller()

    with pytest.raises(Unauthorized):
        controller.set_active(BUYER, True)
    with pytest.raises(Unauthorized):
        controller.flip_sale_state(BUYER)

    assert controller.active is False


def test_admin_can_set_and_flip_phase() -> None:
    controller = _controller()

    assert controller.flip_sale_state(ADMIN) is True
    assert controller.active is True
    controller.set_active(ADMIN, True)
    assert controller.active is True
    assert controller.flip_sale_state(ADMIN) is False
    controller.set_active(ADMIN, False)
    assert controller.active is False


def test_mint_rejected_while_inactive() -> None:
    controller = _controller()

    with pytest.raises(SaleInactive):
        controller.mint(BUYER, 5, PRICE * 5)


def test_mint_inactive_wins_over_other_failures() -> None:
    """Verify SaleInactive is reported even when quantity and payment are also wrong."""

    controller = _controller()

    with pytest.raises(SaleInactive):
        controller.mint(BUYER, 50, Decimal("0"))


def test_mint_batch_limit_wins_over_payment() -> None:
    controller = _controller()
    controller.set_active(ADMIN, True)

    with pytest.raises(BatchSizeExceeded) as exc_info:
        controller.mint(BUYER, 25, Decimal("0"))

    assert exc_info.value.requested == 25
    assert exc_info.value.limit == 20


def test_mint_zero_quantity_is_batch_error() -> None:
    controller = _controller()
    controller.set_active(ADMIN, True)

    with pytest.raises(BatchSizeExceeded):
        controller.mint(BUYER, 0, Decimal("0"))


def test_mint_payment_wins_over_supply() -> None:
    """Verify IncorrectPayment is reported before the supply check."""

    controller = _controller(max_supply=3)
    controller.set_active(ADMIN, True)

    with pytest.raises(IncorrectPayment):
        controller.mint(BUYER, 5, Decimal("0"))

    with pytest.raises(SupplyExceeded):
        controller.mint(BUYER, 5, PRICE * 5)


def test_mint_success_deposits_payment_and_issues_items() -> None:
    controller, supply, vault = _build()
    controller.set_active(ADMIN, True)

    receipt = controller.mint(BUYER, 3, Decimal("0.24"))

    assert receipt.item_ids == (0, 1, 2)
    assert receipt.amount_paid == Decimal("0.24")
    assert receipt.recipient == BUYER
    assert vault.balance == Decimal("0.24")
    assert supply.issued_count == 3


def test_failed_mints_leave_no_side_effects() -> None:
    controller, supply, vault = _build()
    controller.set_active(ADMIN, True)
    controller.mint(BUYER, 19, PRICE * 19)

    for quantity, payment in [(19, PRICE * 19), (5, Decimal("0")), (25, PRICE * 25)]:
        with pytest.raises((SupplyExceeded, IncorrectPayment, BatchSizeExceeded)):
            controller.mint(BUYER, quantity, payment)

    assert supply.issued_count == 19
    assert vault.balance == PRICE * 19
