# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: error_handlers.py
# -----------------------------------------------------------------------------

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.schemas.error import ErrorResponse
from utility.errors import GixError
from utility.logging_utils import get_logger

logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def gix_error_handler(request: Request, exc: GixError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Body shape problems (bad JSON, wrong types) are client errors, not 422s
    logger.info("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
    if request.url.path.startswith("/embed"):
        message = "Invalid input format, expected an array of objects with a 'text' field."
    elif request.url.path.startswith("/chat"):
        message = "Invalid query input"
    else:
        message = "Invalid request"
    return _error(400, message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GixError, gix_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
