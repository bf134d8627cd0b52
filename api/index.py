"""
GoMarketplace Cart - Main FastAPI Application

Single entry point for the cart API. The lifespan owns the session's one
CartLedger: it is built, hydrated and handed to routers before the first
request, and its pending writes are drained on shutdown.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gomarket.cart import CartLedger, CartStore, create_cart_store
from gomarket.errors import CartConfigurationError
from gomarket.logging import get_logger
from gomarket.routers import cart_router, provide_cart_ledger, require_cart_ledger

logger = get_logger(__name__)


def create_app(store: Optional[CartStore] = None, key: Optional[str] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        store: persistent store to use; defaults to CART_STORE_BACKEND
        key: slot key override; defaults to CART_STORAGE_KEY
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        # Startup
        ledger = CartLedger(store if store is not None else create_cart_store(), key=key)
        await ledger.hydrate()
        provide_cart_ledger(app, ledger)
        require_cart_ledger(app)
        logger.info(f"Cart ledger ready (key={ledger.key}, items={len(ledger.products)})")
        yield
        # Shutdown
        await ledger.flush()

    app = FastAPI(
        title="GoMarketplace Cart",
        description="Persisted shopping cart API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CartConfigurationError)
    async def cart_configuration_error_handler(request: Request, exc: CartConfigurationError):
        logger.error(f"Cart requested without a ledger: {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(cart_router, prefix="/api")

    return app


app = create_app()
