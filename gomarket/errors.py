"""
Cart errors.

Message constants are kept here so routers, the ledger and tests agree on
the exact wording.
"""

ERROR_LEDGER_NOT_CONFIGURED = "Cart ledger is not configured for this application"
ERROR_SNAPSHOT_MALFORMED = "Stored cart snapshot is malformed"
ERROR_STORE_UNAVAILABLE = "Cart store unavailable"
ERROR_UNKNOWN_BACKEND = "Unknown cart store backend"


class CartError(Exception):
    """Base class for cart errors."""


class CartConfigurationError(CartError):
    """A consumer asked for the cart ledger but none is attached."""

    def __init__(self, message: str = ERROR_LEDGER_NOT_CONFIGURED):
        super().__init__(message)


class CartSnapshotError(CartError):
    """The persisted snapshot could not be decoded into a cart."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{ERROR_SNAPSHOT_MALFORMED}: {reason}")


class CartStoreError(CartError):
    """The persistent store failed to read or write the cart slot."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f"{ERROR_STORE_UNAVAILABLE} during {operation}"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail)
