"""Conversion of exceptions into JSON error responses: {"message": ...}"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.exceptions import (
    GameNotFoundError,
    HintGenerationError,
    InvalidRequestError,
    WordleError,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"
INTERNAL_ERROR = "Internal Server Error"


def status_code_for(error: WordleError) -> int:
    if isinstance(error, InvalidRequestError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, GameNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def handle_wordle_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, WordleError)
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)

    # hint failures carry a user-facing message, store and config errors do not
    if status_code >= 500 and not isinstance(exc, HintGenerationError):
        return message_response(status_code, INTERNAL_ERROR)
    return message_response(status_code, str(exc))


async def handle_request_validation_error(request: Request, exc: Exception) -> JSONResponse:
    """Missing or mistyped parameters."""
    assert isinstance(exc, RequestValidationError)
    missing = [
        str(error["loc"][-1]) for error in exc.errors() if error.get("type") == "missing"
    ]
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    if missing:
        return message_response(
            status.HTTP_400_BAD_REQUEST, f"Missing parameter(s): {', '.join(missing)}"
        )
    return message_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST)


async def handle_http_exception(request: Request, exc: Exception) -> JSONResponse:
    """Unknown paths and methods are reported as an invalid request."""
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.warning("Invalid request: %s %s", request.method, request.url.path)
        return message_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST)
    return message_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WordleError, handle_wordle_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
