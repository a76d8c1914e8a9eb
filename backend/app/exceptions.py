"""
FAQDesk Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the three failure kinds.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status.
Who:   Raised by FaqService; caught by the handlers in main.py.

Exception Hierarchy:
    FAQDeskError (base)
    ├── ValidationError  → 400 Bad Request (blank required field)
    ├── NotFoundError    → 404 Not Found (no row with that id)
    └── StoreError       → 500 Internal Server Error (persistence failure)
"""

from typing import Any, Dict, Optional


class FAQDeskError(Exception):
    """
    Base exception for all FAQDesk application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, and returned as `details`
                  for validation errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FAQDeskError):
    """
    Raised when client input fails validation.

    When:    `question` is missing, empty or whitespace-only.
    HTTP:    400 Bad Request

    Always raised before the store is touched.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(FAQDeskError):
    """
    Raised when the targeted row does not exist.

    When:    GET, PUT or DELETE /faq/{id} matched zero rows.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(FAQDeskError):
    """
    Raised when the persistence layer fails.

    When:    Connectivity loss, constraint violation, timeout, or any other
             error raised while executing or committing a statement.
    HTTP:    500 Internal Server Error

    `message` holds the raw failure text from the driver. Whether it reaches
    the client is controlled by settings.expose_store_errors.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
