"""
Capped Mint Ledger API - Main Application.

Serves one capped-supply collection. The root endpoint reports which collection
this deployment issues and where its sale status lives; every mutating route
identifies its caller through the X-Caller-Address header.
"""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.dependencies import get_collection
from services.collection import Collection

app = FastAPI(
    title="Capped Mint Ledger API",
    description="Fixed-price, capped-supply issuance of collectible items",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# TODO: Restrict origins once the mint frontend domain is fixed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Content-Type", "X-Caller-Address"],
)


@app.get("/health", tags=["Health"])
def health_check():
    return {
        "status": "healthy",
        "version": __version__,
        "service": "capped-mint-ledger-api"
    }


@app.get("/", tags=["Root"])
def root(collection: Collection = Depends(get_collection)):
    """
    Identify the collection served by this deployment.

    Supply figures here are a convenience; `/api/v1/collection` is the full
    status view.
    """
    return {
        "collection": collection.name,
        "symbol": collection.symbol,
        "max_supply": collection.max_supply,
        "issued_count": collection.issued_count,
        "sale_active": collection.active,
        "version": __version__,
        "status": "/api/v1/collection",
        "docs": "/docs",
    }


from api.routers import admin, collection, items, mint  # noqa: E402

app.include_router(collection.router, prefix="/api/v1", tags=["Collection"])
app.include_router(mint.router, prefix="/api/v1", tags=["Mint"])
app.include_router(items.router, prefix="/api/v1", tags=["Items"])
app.include_router(admin.router, prefix="/api/v1/admin", tags=["Admin"])
