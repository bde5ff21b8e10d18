"""
Uniform Response Envelope

Every endpoint answers with the same body shape:

    {"code": 0, "message": "success", "data": {...}}          # success
    {"code": 1010, "message": "The data was not found!"}      # error

The HTTP status travels alongside the body. Success responses always carry
``code: 0``; errors carry a caller-supplied code, 1000 when none is given.
"""

import json
import logging
from enum import IntEnum
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StatusCode(IntEnum):
    """HTTP status codes used by the envelope"""
    SUCCESS = 200
    BAD_REQUEST = 400
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


class ErrorCode(IntEnum):
    """Application codes carried in the envelope body"""
    SUCCESS = 0
    DEFAULT = 1000
    NOT_FOUND = 1010


class ServiceError(Exception):
    """
    Base class for errors that map onto the envelope.

    Subclasses pick the application code and HTTP status; the message is
    the exception text.
    """
    code: int = ErrorCode.DEFAULT
    status_code: int = StatusCode.INTERNAL_SERVER_ERROR


class RequestValidationFailed(ServiceError):
    """Raised when request input fails validation"""
    status_code = StatusCode.FORBIDDEN

    def __init__(self, errors: Iterable[dict]):
        self.errors = list(errors)
        super().__init__(validation_message(self.errors))


def validation_message(errors: Iterable[dict]) -> str:
    """JSON-encode a pydantic-style error list for the envelope message"""
    return json.dumps(
        [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in errors
        ]
    )


def success_response(data: Any = None, status_code: int = StatusCode.SUCCESS) -> JSONResponse:
    """Build a success envelope"""
    body = {
        "code": int(ErrorCode.SUCCESS),
        "message": "success",
        "data": jsonable_encoder(data, by_alias=True),
    }
    return JSONResponse(status_code=int(status_code), content=body)


def error_response(
    message: str,
    code: int = ErrorCode.DEFAULT,
    status_code: int = StatusCode.INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """Build an error envelope (no data field)"""
    body = {"code": int(code), "message": message}
    return JSONResponse(status_code=int(status_code), content=body)


def exception_response(exc: Exception) -> JSONResponse:
    """
    Translate an exception into an error envelope.

    ServiceError subclasses keep their own code and status; anything else
    is an unexpected failure and becomes a 500 with the raw message.
    """
    if isinstance(exc, ServiceError):
        if exc.status_code >= StatusCode.INTERNAL_SERVER_ERROR:
            logger.error(f"{type(exc).__name__}: {exc}", exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__}: {exc}")
        return error_response(str(exc), code=exc.code, status_code=exc.status_code)

    logger.error(f"Unexpected error: {exc}", exc_info=exc)
    return error_response(str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Route framework-level validation failures through the envelope"""

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        return exception_response(RequestValidationFailed(exc.errors()))


__all__ = [
    "StatusCode",
    "ErrorCode",
    "ServiceError",
    "RequestValidationFailed",
    "validation_message",
    "success_response",
    "error_response",
    "exception_response",
    "register_exception_handlers",
]
