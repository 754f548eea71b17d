"""Domain exceptions raised by services and rendered by the API layer."""

from typing import Iterable


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ValidationError":
        return cls(f"Missing required fields: {', '.join(fields)}")


class NotFoundError(AppError):
    status_code = 404


class PersistenceError(AppError):
    """Store unavailable or constraint violated.

    The message is user-facing and generic; the cause is logged where the
    error is raised.
    """

    status_code = 500


class AuthenticationError(AppError):
    status_code = 401


class PermissionDeniedError(AppError):
    status_code = 403
