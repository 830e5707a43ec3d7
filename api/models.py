"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Collection Models
# ============================================================================

class CollectionStatusResponse(BaseModel):
    """Current committed state of the collection."""
    name: str
    symbol: str
    admin: str
    issued_count: int
    max_supply: int
    sale_active: bool
    max_batch_size: int
    unit_price: Decimal
    currency: str
    reserve_block_size: int
    provenance_hash: str
    reveal_timestamp: Optional[int] = None
    base_uri: str
    treasury_balance: Decimal

    class Config:
        json_schema_extra = {
            "example": {
                "name": "BirdNFT",
                "symbol": "BRD",
                "admin": "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4",
                "issued_count": 19,
                "max_supply": 25,
                "sale_active": True,
                "max_batch_size": 20,
                "unit_price": "0.08",
                "currency": "ETH",
                "reserve_block_size": 30,
                "provenance_hash": "",
                "reveal_timestamp": None,
                "base_uri": "ipfs://collection/",
                "treasury_balance": "1.52"
            }
        }


class QuoteResponse(BaseModel):
    """Exact payment required for a mint request."""
    quantity: int
    unit_price: Decimal
    total: Decimal
    currency: str


# ============================================================================
# Mint Models
# ============================================================================

class MintRequest(BaseModel):
    """Request to mint items during the public sale."""
    quantity: int = Field(
        ...,
        description="Number of items to mint (1..max_batch_size)"
    )
    payment: Decimal = Field(
        ...,
        description="Amount sent; must equal unit_price * quantity exactly"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "quantity": 2,
                "payment": "0.16"
            }
        }


class MintResponse(BaseModel):
    """Response after a successful mint."""
    recipient: str
    item_ids: List[int]
    amount_paid: Decimal
    minted_at: datetime
    issued_count: int


# ============================================================================
# Item Models
# ============================================================================

class ItemResponse(BaseModel):
    item_id: int
    owner: str
    token_uri: str


class OwnerItemsResponse(BaseModel):
    owner: str
    count: int
    item_ids: List[int]


# ============================================================================
# Admin Models
# ============================================================================

class SaleStateRequest(BaseModel):
    """Set the sale phase explicitly, or toggle it when `active` is omitted."""
    active: Optional[bool] = None


class SaleStateResponse(BaseModel):
    sale_active: bool


class ReservationResponse(BaseModel):
    recipient: str
    item_ids: List[int]
    issued_count: int


class WithdrawalResponse(BaseModel):
    recipient: str
    amount: Decimal
    treasury_balance: Decimal


class ProvenanceRequest(BaseModel):
    provenance_hash: str


class RevealTimestampRequest(BaseModel):
    reveal_timestamp: Optional[int] = None


class BaseUriRequest(BaseModel):
    base_uri: str


class MetadataResponse(BaseModel):
    provenance_hash: str
    reveal_timestamp: Optional[int] = None
    base_uri: str


