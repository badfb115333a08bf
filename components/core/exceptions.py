"""Application error taxonomy.

Every error carries an HTTP status and a machine-readable code; the REST
layer renders them as ``{"error": message, "code": code}``.
"""

from typing import List, Optional


class FinTrackError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class AuthError(FinTrackError):
    """Missing, expired or invalid credentials."""
    status_code = 401
    code = "UNAUTHORIZED"


class BadRequestError(FinTrackError):
    """Request is well-formed JSON but cannot be acted on."""
    status_code = 400
    code = "BAD_REQUEST"


class ValidationError(FinTrackError):
    """Missing or malformed fields."""
    status_code = 422
    code = "VALIDATION_ERROR"

    def __init__(self, message: str, fields: Optional[List[str]] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.fields = list(fields or [])


class NotFoundError(FinTrackError):
    """Record does not exist or belongs to another user."""
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(FinTrackError):
    """Unique constraint violated."""
    status_code = 409
    code = "CONFLICT"


class RateLimitError(FinTrackError):
    """Too many requests; raised by rate-limiting middleware."""
    status_code = 429
    code = "RATE_LIMITED"
