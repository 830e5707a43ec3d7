"""
Translate issuance failures into HTTP errors.

Each failure keeps its stable code in the response body so clients can branch
on which rule was violated.
"""

from __future__ import annotations

from fastapi import HTTPException

from domain.errors import (
    BatchSizeExceeded,
    CollectionError,
    IncorrectPayment,
    SaleInactive,
    SupplyExceeded,
    Unauthorized,
    UnknownItem,
)

_STATUS_BY_ERROR = {
    Unauthorized: 403,
    SaleInactive: 409,
    BatchSizeExceeded: 400,
    IncorrectPayment: 402,
    SupplyExceeded: 409,
}


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, CollectionError):
        status_code = _STATUS_BY_ERROR.get(type(exc), 400)
        return HTTPException(
            status_code=status_code,
            detail={"error": exc.code, "message": str(exc)},
        )
    if isinstance(exc, UnknownItem):
        return HTTPException(
            status_code=404,
            detail={"error": "UNKNOWN_ITEM", "message": str(exc)},
        )
    return HTTPException(status_code=500, detail=f"Unexpected failure: {exc}")
