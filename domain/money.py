"""
Domain: currency amounts.

Amounts are exact Decimals. Floats are refused so that price comparisons are
never subject to binary rounding, and arithmetic on them runs under an exact
context instead of the 28 digit default.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation, Overflow, localcontext
from typing import Union

AmountLike = Union[Decimal, int, str]

ZERO = Decimal("0")

# Arithmetic on amounts must never round; any inexact result raises.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[Inexact, InvalidOperation, Overflow],
)


def to_amount(name: str, value: AmountLike) -> Decimal:
    """
    Convert a user supplied amount into a Decimal.

    Accepts Decimal, int and numeric strings. bool and float are rejected.
    """

    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"{name} must be a Decimal, int or numeric string, not {type(value).__name__}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"{name} is not a valid amount: {value!r}") from exc
    else:
        raise TypeError(f"Unsupported amount type for {name}: {type(value)!r}")

    if not amount.is_finite():
        raise ValueError(f"{name} must be a finite amount")
    return amount


def require_non_negative(name: str, value: Decimal) -> None:
    if value < ZERO:
        raise ValueError(f"{name} must be non-negative")


def exact_multiply(amount: Decimal, factor: AmountLike) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return amount * factor


def exact_add(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return left + right
