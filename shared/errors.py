# shared/errors.py
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    """HTTP error carrying a short machine-readable reason."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    reason = "InternalError"
    default_detail = "Internal server error"

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        message: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(
            status_code=status_code or type(self).status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )
        # Human-readable text the client can render as is
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        body = {"error": self.reason, "detail": self.detail}
        if self.message:
            body["message"] = self.message
        return body


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    reason = "Unauthenticated"
    default_detail = "Unauthorized"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class NoProfile(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    reason = "NoProfile"
    default_detail = "User profile not found"


class InsufficientRole(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    reason = "InsufficientRole"
    default_detail = "Access denied - insufficient permissions"


class Forbidden(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    reason = "Forbidden"
    default_detail = "Operation not allowed"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    reason = "NotFound"
    default_detail = "Not found"


class AlreadyExists(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    reason = "AlreadyExists"
    default_detail = "Super admin already exists"


class EmailUnavailable(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    reason = "EmailUnavailable"
    default_detail = "Email address not available"


class SelfDeleteForbidden(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    reason = "SelfDeleteForbidden"
    default_detail = "Cannot delete yourself"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    reason = "Conflict"
    default_detail = "Stale revision, reload and retry"


class UpstreamError(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY
    reason = "UpstreamError"
    default_detail = "Upstream service error"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    reason = "ValidationError"
    default_detail = "Invalid request"


class InternalError(AppError):
    pass


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "Invalid request")
    logger.info("Rejected request to %s: %s", request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=ValidationError(detail).to_body())


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=InternalError().to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
