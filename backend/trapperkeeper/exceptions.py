"""
Trapper Keeper Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the two failure modes of the API.
Why:   Services raise typed errors; global handlers (registered in main.py)
       map them to HTTP status codes so route handlers stay free of try/except.
How:   Each exception carries a user-facing message and an optional context
       dict that is logged but never returned to the client.

Exception Hierarchy:
    TrapperKeeperError (base)   → 500 Internal Server Error
    ├── ValidationError         → 422 Unprocessable Entity
    └── NotFoundError           → 404 Not Found

There are no transient failures in this service (no external I/O), so
nothing here is retryable.
"""

from typing import Any, Dict, Iterable, Optional


class TrapperKeeperError(Exception):
    """
    Base exception for all Trapper Keeper application errors.

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


class ValidationError(TrapperKeeperError):
    """
    Raised when a create or replace body is missing a required field.

    HTTP:    422 Unprocessable Entity

    The check is a presence check, not a schema check: a field counts as
    missing when it is absent or falsy. Names of the offending fields are kept
    in `context["missing"]` for the server log.
    """

    def __init__(
        self,
        message: str = "Please provide a title, color, and issues for your note",
        missing: Optional[Iterable[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if missing:
            ctx["missing"] = list(missing)
        super().__init__(message=message, context=ctx)
        self.missing = ctx.get("missing", [])


class NotFoundError(TrapperKeeperError):
    """
    Raised when no note matches the requested id.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id
