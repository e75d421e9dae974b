"""
Domain exceptions for the SMS transaction gateway.
"""


class GatewayError(Exception):
    """Base class for gateway errors."""


class StoreError(GatewayError):
    """Raised when the transaction store cannot be read or written."""


class StoreEnumerationError(StoreError):
    """Raised when the store cannot list its accounts, so a sweep cannot start."""
