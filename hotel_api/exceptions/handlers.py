import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import NotFoundError, StoreError, validation_message

logger = logging.getLogger(__name__)


async def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("Not found: %s", exc.message)
    return JSONResponse(
        status_code=404,
        content={"message": exc.message},
    )


async def store_error_handler(_request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store error: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content={"error": exc.message},
    )


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Body validation shares the generic error branch with store failures
    message = validation_message("Request", exc.errors())
    logger.warning("Rejected request: %s", message)
    return JSONResponse(
        status_code=500,
        content={"error": message},
    )
