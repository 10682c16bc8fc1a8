"""
Error taxonomy for the HTTP layer.

Every AppError is rendered by the handler in main.py as
``{"error": message}`` with its status code.
"""
from typing import Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base error carrying an HTTP status and a client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers


class AuthenticationMissing(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthenticationInvalid(AppError):
    """Bad signature (403) or a well-formed token for a missing user (401)."""

    status_code = status.HTTP_403_FORBIDDEN


class ValidationConflict(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class CredentialMismatch(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UpstreamGenerationFailure(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY


class PersistenceFailure(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# Store / service level errors, translated by routes and the request gate

class DuplicateEmailError(Exception):
    pass


class InvalidTokenError(Exception):
    pass


class GenerationError(Exception):
    pass
