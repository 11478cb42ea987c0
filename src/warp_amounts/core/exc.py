"""
Core exception types for warp_amounts.core.

These are dependency-free and may be imported by all modules. Malformed
scale or decimals values are never reported through them; those fall back
to documented defaults instead.
"""

__all__ = [
    "AmountDomainError",
    "MessageBodyError",
    "RouteConfigError",
]


class AmountDomainError(Exception):
    """Raised when a message amount violates the non-negative integer domain."""
    pass


class MessageBodyError(Exception):
    """Raised when a warp message body cannot be decoded.

    Attributes
    ----------
    body : str
        The offending body as received (possibly truncated by the caller).
    reason : str
        Short machine-friendly reason, e.g. "too_short" or "not_hex".
    """

    def __init__(self, body, reason):
        super().__init__(f"Cannot decode warp message body ({reason}): {body!r}")
        self.body = body
        self.reason = reason


class RouteConfigError(Exception):
    """Raised when a warp route registry document has the wrong shape."""
    pass
