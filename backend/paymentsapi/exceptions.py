"""
Payments API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions.
How:   Each exception carries a message and an optional context dict.
       The global handler registered in main.py turns them into JSON
       error responses; context is logged, never returned to the client.

Exception Hierarchy:
    PaymentsApiError (base)       → 500 Internal Server Error
    └── RouterLoadError           raised while building the app

Request-level failures the application does not define (unknown paths,
wrong methods) are answered by FastAPI's default 404/405 responses.
"""

from typing import Any, Dict, Optional


class PaymentsApiError(Exception):
    """
    Base exception for all Payments API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RouterLoadError(PaymentsApiError):
    """
    Raised when a configured router cannot be resolved.

    When:    The dotted path is malformed, its module fails to import,
             the attribute is missing, or it is not an APIRouter.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message=f"Cannot load router '{path}': {reason}", context=ctx)
        self.path = path
        self.reason = reason
