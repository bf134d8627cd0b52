"""
Shared Dependencies for Routers

The cart ledger is created once by the application lifespan and passed in
explicitly through ``app.state``; there is no module-level singleton.
"""
from fastapi import FastAPI, Request

from gomarket.cart import CartLedger
from gomarket.errors import CartConfigurationError

CART_LEDGER_STATE_ATTR = "cart_ledger"


def provide_cart_ledger(app: FastAPI, ledger: CartLedger) -> None:
    """Attach the session's ledger to the application."""
    setattr(app.state, CART_LEDGER_STATE_ATTR, ledger)


def require_cart_ledger(app: FastAPI) -> CartLedger:
    """Fail-fast startup check that a ledger has been provided."""
    ledger = getattr(app.state, CART_LEDGER_STATE_ATTR, None)
    if not isinstance(ledger, CartLedger):
        raise CartConfigurationError()
    return ledger


def get_cart_ledger(request: Request) -> CartLedger:
    """FastAPI dependency returning the active ledger."""
    return require_cart_ledger(request.app)
