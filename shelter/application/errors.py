from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class AlreadyDeleted(ConflictError):
    code = "already_deleted"


class InvalidStateTransition(AppError):
    code = "invalid_state_transition"
    status_code = 409


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class RepositoryError(AppError):
    """A store operation failed.

    ``cause`` holds the specific failure (validation, not found, conflict or an
    I/O error). When the cause is an ``AppError`` its code and status are
    surfaced so callers can tell the kinds apart without parsing messages.
    """

    code = "repository_error"
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.cause = cause
        if isinstance(cause, AppError):
            self.code = cause.code
            self.status_code = cause.status_code
