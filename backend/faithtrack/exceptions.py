"""
Faithtrack Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for each failure the services report.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    FaithtrackError (base)
    ├── UnauthenticatedError        → 401 Unauthorized
    ├── NotFoundOrForbiddenError    → 404 Not Found
    ├── NotFoundError               → 404 Not Found
    ├── UpstreamError               → 502 Bad Gateway
    │   └── MalformedUpstreamResponse  (handled inside GrokService)
    └── DatabaseError               → 500 Internal Server Error

Privacy Note:
    NotFoundOrForbiddenError is used both when a record is missing and when it
    belongs to another user. Callers can never learn whether someone else's
    record exists.
"""

from typing import Any, Dict, Optional


class FaithtrackError(Exception):
    """
    Base exception for all Faithtrack application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, only returned where the handler opts in)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthenticatedError(FaithtrackError):
    """
    Raised when an operation needs a caller identity and none was resolved.

    When:    Any create/remove/mark/increment call, and the save step of an
             AI search, made without a valid bearer token.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundOrForbiddenError(FaithtrackError):
    """
    Raised when an owned record is missing or belongs to a different user.

    The two outcomes share one error (and one message) on purpose.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"The requested {resource} was not found", context=ctx)


class NotFoundError(FaithtrackError):
    """
    Raised when a requested record does not exist and ownership is irrelevant.

    When:    Incrementing the prayer count of a prayer wall post that is gone.
    HTTP:    404 Not Found
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
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class UpstreamError(FaithtrackError):
    """
    Raised when the external chat-completion API call fails.

    What:    Non-2xx status, transport failure, or an unparseable body.
    HTTP:    502 Bad Gateway

    Attributes:
        status_code: Upstream HTTP status, None for transport failures
        body:        Upstream response text, preserved verbatim
    """

    def __init__(
        self,
        message: str = "The AI guidance service request failed",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if status_code is not None:
            ctx["upstream_status"] = status_code
        if body is not None:
            ctx["upstream_body"] = body
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
        self.body = body


class MalformedUpstreamResponse(UpstreamError):
    """
    Raised when a successful upstream response lacks `choices[0].message.content`.

    GrokService catches this and answers with UNAVAILABLE_ANSWER instead of
    failing, so it never reaches the HTTP layer.
    """

    def __init__(
        self,
        message: str = "The AI guidance service returned an unexpected response shape",
        body: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, body=body, context=context)


class DatabaseError(FaithtrackError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Details are
        logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
