"""
Items API Endpoints.

Ownership and content-locator lookups for issued items.
"""

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_collection
from api.errors import to_http_exception
from api.models import ItemResponse, OwnerItemsResponse
from domain.errors import UnknownItem
from services.collection import Collection

router = APIRouter()


@router.get(
    "/items/{item_id}",
    response_model=ItemResponse,
    summary="Item Details",
)
def get_item(
    item_id: int = Path(..., ge=0),
    collection: Collection = Depends(get_collection),
):
    try:
        return ItemResponse(
            item_id=item_id,
            owner=collection.owner_of(item_id),
            token_uri=collection.token_uri(item_id),
        )
    except UnknownItem as e:
        raise to_http_exception(e)


@router.get(
    "/owners/{owner}/items",
    response_model=OwnerItemsResponse,
    summary="Items Held By Owner",
)
def get_owner_items(owner: str, collection: Collection = Depends(get_collection)):
    item_ids = collection.items_of(owner)
    return OwnerItemsResponse(owner=owner, count=len(item_ids), item_ids=item_ids)
