"""Error kinds, repository results and the HTTP error boundary.

Repository operations that can fail for an expected reason return ``Ok`` or
``Err`` instead of raising. Routers call ``unwrap`` and the exception handlers
registered here turn the resulting ``DomainError`` into the JSON error
envelope, so the kind → status mapping lives in exactly one place.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INVALID_OPERATION = "invalid_operation"
    INVALID_ARGUMENT = "invalid_argument"

    @property
    def status_code(self) -> int:
        if self is ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        return status.HTTP_400_BAD_REQUEST


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str


Result = Union[Ok[T], Err]


class DomainError(Exception):
    """Expected failure that maps onto a 4xx response."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise the ``Err`` as a ``DomainError``."""
    if isinstance(result, Err):
        raise DomainError(result.kind, result.message)
    return result.value


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _field_name(loc) -> str:
    # loc looks like ("body", "dueDate") or ("query", "pageSize")
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else str(loc[0])


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc.kind.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        failures = [
            {"field": _field_name(error["loc"]), "message": error["msg"]}
            for error in exc.errors()
        ]
        logger.warning("Rejected request to %s: %s", request.url.path, failures)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=failures)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("An unhandled exception has occurred.")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
