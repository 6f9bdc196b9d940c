"""Domain errors and the exception handlers that render them.

Every error body has the shape ``{"message", "errors"?, "request_id"}``.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.tracker.core.logging import get_logger

logger = get_logger(__name__)

_REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


class TrackerError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    @classmethod
    def for_field(cls, path: str, message: str) -> "TrackerError":
        return cls(message, errors=[{"path": path, "message": message}])


class ValidationFailedError(TrackerError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(TrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(TrackerError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class NotFoundError(TrackerError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class ConflictError(TrackerError):
    """A uniqueness rule was violated; `errors[0].path` names the field."""

    status_code = status.HTTP_409_CONFLICT


class InvalidRelationshipError(TrackerError):
    """A parent/child pair is not allowed by the work-item hierarchy."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message, errors=[{"path": "parent_id", "message": message}])


class HasChildrenError(TrackerError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Cannot delete a work item that has child items"):
        super().__init__(message, errors=[{"path": "id", "message": message}])


def _error_body(message: str, errors: list[dict[str, str]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = errors
    body["request_id"] = correlation_id.get()
    return body


def _validation_path(loc: tuple[Any, ...] | list[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
        if exc.status_code == status.HTTP_409_CONFLICT:
            logger.info("Conflict", path=request.url.path, errors=exc.errors)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.errors),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"path": _validation_path(err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Validation failed", errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )
