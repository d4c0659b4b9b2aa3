# common/exceptions.py

"""
DOMAIN ERRORS

Centralized error taxonomy shared by every service.

Rules:
- Services raise these; they never build HTTP responses.
- Each error carries the HTTP status it maps to, so the API layer
  (common.api.exception_handler) is the single translation point.
- Messages are short and safe to show to a user.
"""

from __future__ import annotations


class PharmaSysError(Exception):
    """Base exception for all domain failures."""

    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PharmaSysError):
    """Missing or malformed input. Raised before any write begins."""

    status_code = 400
    default_message = "Invalid input"


class AuthenticationError(PharmaSysError):
    """Bad credentials, or a missing / invalid / expired token."""

    status_code = 401
    default_message = "Unauthorized"


class AuthorizationError(PharmaSysError):
    """Valid identity, insufficient capability."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(PharmaSysError):
    status_code = 404
    default_message = "Not found"


class InvalidStateError(PharmaSysError):
    """Operation is not legal for the entity's current state."""

    status_code = 409
    default_message = "Operation not allowed in the current state"


class OutOfStockError(InvalidStateError):
    """No eligible batch, or not enough quantity left in the assigned batch."""

    default_message = "Insufficient stock"


class InternalError(PharmaSysError):
    status_code = 500
    default_message = "Internal server error"
