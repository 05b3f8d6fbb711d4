"""
PetClinic Owners — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the service.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       render the error page with the matching HTTP status code.
Who:   Raised by routes and repositories; caught by global handlers.

Exception Hierarchy:
    PetClinicError (base)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Form validation failures are NOT exceptions: they are collected into a
BindingResult and re-rendered on the originating form (see petclinic.forms).
"""

from typing import Any, Dict, Optional


class PetClinicError(Exception):
    """
    Base exception for all PetClinic application errors.

    Attributes:
        message:  User-facing error description (safe to render)
        context:  Additional debug info (logged but NOT shown to the user)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PetClinicError):
    """
    Raised when a requested resource does not exist.

    When:  GET /owners/{id}, GET or POST /owners/{id}/edit with an unknown id.
    HTTP:  404 Not Found

    The repository returns None for missing records; the HTTP layer converts
    None → NotFoundError so the service decisions stay free of HTTP concerns.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PetClinicError):
    """
    Raised when database operations fail unexpectedly.

    When:  Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:  500 Internal Server Error

    The message rendered to the user is always generic; the SQL error is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
