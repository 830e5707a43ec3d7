"""
Collection API Endpoints.

Read-only views of the committed collection state and mint quotes.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_collection
from api.models import CollectionStatusResponse, QuoteResponse
from services.collection import Collection

router = APIRouter()


@router.get(
    "/collection",
    response_model=CollectionStatusResponse,
    summary="Collection Status",
    description="Supply, sale phase, price, metadata and treasury balance."
)
def get_collection_status(collection: Collection = Depends(get_collection)):
    snapshot = collection.snapshot()
    return CollectionStatusResponse(
        name=snapshot.name,
        symbol=snapshot.symbol,
        admin=snapshot.admin,
        issued_count=snapshot.issued_count,
        max_supply=snapshot.max_supply,
        sale_active=snapshot.active,
        max_batch_size=snapshot.max_batch_size,
        unit_price=snapshot.unit_price,
        currency=snapshot.currency,
        reserve_block_size=snapshot.reserve_block_size,
        provenance_hash=snapshot.provenance_hash,
        reveal_timestamp=snapshot.reveal_timestamp,
        base_uri=snapshot.base_uri,
        treasury_balance=snapshot.treasury_balance,
    )


@router.get(
    "/quotes",
    response_model=QuoteResponse,
    summary="Mint Quote",
    description="Exact payment required to mint the given quantity."
)
def get_quote(
    quantity: int = Query(..., gt=0),
    collection: Collection = Depends(get_collection),
):
    if quantity > collection.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Can only mint {collection.max_batch_size} tokens at a time"
        )

    quote = collection.quote(quantity)
    return QuoteResponse(
        quantity=quote.quantity,
        unit_price=quote.unit_price,
        total=quote.total,
        currency=quote.currency,
    )
