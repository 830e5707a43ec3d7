"""
Admin API Endpoints.

Administrator-only operations. Every endpoint rejects non-administrator callers
with 403 before looking at the request body.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_caller, get_collection
from api.errors import to_http_exception
from api.models import (
    BaseUriRequest,
    MetadataResponse,
    ProvenanceRequest,
    ReservationResponse,
    RevealTimestampRequest,
    SaleStateRequest,
    SaleStateResponse,
    WithdrawalResponse,
)
from domain.errors import CollectionError
from services.collection import Collection

router = APIRouter()


def _metadata(collection: Collection) -> MetadataResponse:
    return MetadataResponse(
        provenance_hash=collection.provenance_hash,
        reveal_timestamp=collection.reveal_timestamp,
        base_uri=collection.base_uri,
    )


@router.post(
    "/sale-state",
    response_model=SaleStateResponse,
    summary="Set Or Flip Sale Phase",
)
def update_sale_state(
    request: SaleStateRequest,
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        if request.active is None:
            active = collection.flip_sale_state(caller)
        else:
            collection.set_active(caller, request.active)
            active = collection.active
    except CollectionError as e:
        raise to_http_exception(e)

    return SaleStateResponse(sale_active=active)


@router.post(
    "/reserve",
    response_model=ReservationResponse,
    summary="Reserve Block For Administrator",
)
def reserve_items(
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        item_ids = collection.reserve_for_admin(caller)
    except CollectionError as e:
        raise to_http_exception(e)

    return ReservationResponse(
        recipient=caller,
        item_ids=item_ids,
        issued_count=collection.issued_count,
    )


@router.post(
    "/withdraw",
    response_model=WithdrawalResponse,
    summary="Withdraw Treasury",
)
def withdraw_funds(
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        amount = collection.withdraw(caller)
    except CollectionError as e:
        raise to_http_exception(e)

    return WithdrawalResponse(
        recipient=caller,
        amount=amount,
        treasury_balance=collection.treasury_balance,
    )


@router.put("/provenance", response_model=MetadataResponse, summary="Set Provenance Hash")
def set_provenance(
    request: ProvenanceRequest,
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        collection.set_provenance_hash(caller, request.provenance_hash)
    except CollectionError as e:
        raise to_http_exception(e)
    return _metadata(collection)


@router.put("/reveal-timestamp", response_model=MetadataResponse, summary="Set Reveal Timestamp")
def set_reveal_timestamp(
    request: RevealTimestampRequest,
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        collection.set_reveal_timestamp(caller, request.reveal_timestamp)
    except CollectionError as e:
        raise to_http_exception(e)
    return _metadata(collection)


@router.put("/base-uri", response_model=MetadataResponse, summary="Set Base URI")
def set_base_uri(
    request: BaseUriRequest,
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    try:
        collection.set_base_uri(caller, request.base_uri)
    except CollectionError as e:
        raise to_http_exception(e)
    return _metadata(collection)
