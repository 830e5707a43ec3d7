"""
Mint API Endpoints.

Public issuance during the active sale.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_caller, get_collection
from api.errors import to_http_exception
from api.models import MintRequest, MintResponse
from domain.errors import CollectionError
from services.collection import Collection

router = APIRouter()


@router.post(
    "/mint",
    response_model=MintResponse,
    summary="Mint Items",
    description="Mint items to the caller against an exact payment."
)
def mint_items(
    request: MintRequest,
    caller: str = Depends(get_caller),
    collection: Collection = Depends(get_collection),
):
    """
    Mint `quantity` items to the caller.

    **Checks (first failure wins, nothing changes on failure):**
    1. Sale is active (409 `SALE_INACTIVE`)
    2. 1 <= quantity <= max_batch_size (400 `BATCH_SIZE_EXCEEDED`)
    3. payment == unit_price * quantity (402 `INCORRECT_PAYMENT`)
    4. Supply cap not exceeded (409 `SUPPLY_EXCEEDED`)

    **Example request:**
    ```json
    {"quantity": 2, "payment": "0.16"}
    ```
    """
    try:
        receipt = collection.mint(caller, request.quantity, request.payment)
    except CollectionError as e:
        raise to_http_exception(e)

    return MintResponse(
        recipient=receipt.recipient,
        item_ids=list(receipt.item_ids),
        amount_paid=receipt.amount_paid,
        minted_at=receipt.minted_at,
        issued_count=collection.issued_count,
    )
