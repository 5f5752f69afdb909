"""
Pinboard Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes. They replace raw driver exceptions that would leak
       internal details to the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    PinboardError (base)
    ├── NotFoundError   → 404 Not Found   {"message": "Board not found"}
    └── DatabaseError   → 500 Server Error {"message": "Server error"}

    The 500 body is deliberately uniform: the caller never learns whether the
    write failed on a constraint, a lost connection, or anything else.
"""

from typing import Any, Dict, Optional


SERVER_ERROR_MESSAGE = "Server error"


class PinboardError(Exception):
    """
    Base exception for all Pinboard application errors.

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


class NotFoundError(PinboardError):
    """
    Raised when a lookup by id yields no record.

    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records (not an exception).
    Services convert None → NotFoundError so the not-found signal is never
    confused with a server error.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class DatabaseError(PinboardError):
    """
    Raised when a persistence operation fails.

    When:    Constraint violation, lost connection, deadlock, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always the generic
        SERVER_ERROR_MESSAGE. The operation tag and the original exception are
        logged server-side by the service that caught it.
    """

    def __init__(
        self,
        message: str = SERVER_ERROR_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
