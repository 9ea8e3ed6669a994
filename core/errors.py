"""
Error taxonomy shared by the services, the security layer and the repositories.

Every error maps to exactly one HTTP status and one opaque ``kind`` string.
The kind is the only thing a client ever sees: ``{"error": kind}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    kind: str = "app_error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.kind)


class UnsupportedLanguage(AppError):
    kind = "unsupported_language"


class SegmentationFailed(AppError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    kind = "segmentation_failed"


class EmptyContent(AppError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    kind = "empty_content"


class EmptyWord(AppError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    kind = "empty_word"


class UsernameTaken(AppError):
    kind = "username_taken"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "invalid_credentials"


class TokenInvalid(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "token_invalid"


class TokenExpired(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "token_expired"


class RefreshMismatch(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "refresh_mismatch"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"


class StoreUnavailable(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    kind = "store_unavailable"


_UNAUTHORIZED = (InvalidCredentials, TokenInvalid, TokenExpired, RefreshMismatch)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, _UNAUTHORIZED) else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.kind}, headers=headers)


def handle_errors(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
