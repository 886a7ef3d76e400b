# app/core/exceptions.py


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class Unauthenticated(AppError):
    """Missing, malformed or expired bearer token, or the account is gone."""

    status_code = 401


class NotFound(AppError):
    status_code = 404


class Conflict(AppError):
    """Uniqueness violation that was not absorbed by an upsert."""

    status_code = 400
