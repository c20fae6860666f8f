"""
Employee Directory Backend - Custom Exception Hierarchy
=======================================================

What:  Application-specific exceptions for startup and request-time failures.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch the request-time
       ones and turn them into empty-bodied responses with the right status.
Who:   Raised by config, database, the gateway and the routes.

Exception Hierarchy:
    EmployeeDirectoryError (base)
    ├── ConfigError              → startup abort (required setting missing)
    ├── DatabaseConnectionError  → startup abort (store unreachable)
    ├── NotFoundError            → 404 Not Found (update/delete miss)
    └── DatabaseError            → 500 Internal Server Error

Reads do not raise NotFoundError: GET /api/employees/{id} answers 200 with a
null body when nothing matches.
"""

from typing import Any, Dict, Optional


class EmployeeDirectoryError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
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


class ConfigError(EmployeeDirectoryError):
    """
    Raised when a required setting is missing at startup.

    What:    The process cannot start without DATABASE_URL.
    When:    Settings.validate_required(), called from init_pool().
    Effect:  The lifespan re-raises it and the ASGI server aborts startup.
    """

    def __init__(
        self,
        message: str = "Required configuration is missing",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseConnectionError(EmployeeDirectoryError):
    """
    Raised when the store cannot be reached at startup.

    When:    The SELECT 1 probe in init_pool() fails on every attempt.
    Effect:  Same as ConfigError, the process does not start.
    """

    def __init__(
        self,
        message: str = "Can't connect to database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(EmployeeDirectoryError):
    """
    Raised when an update or delete matches no record.

    HTTP:    404 Not Found, empty body.

    The gateway reports a miss as None (update) or 0 affected rows (delete);
    the route converts that into this exception.
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


class DatabaseError(EmployeeDirectoryError):
    """
    Raised when a store call fails during a live request.

    What:    A query, insert, update or delete failed (connection lost,
             pool checkout timeout, constraint violation, ...).
    HTTP:    500 Internal Server Error, empty body.

    The statement and driver error stay in `context` and the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
