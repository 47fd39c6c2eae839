"""
Maps core error kinds to HTTP responses of the form {"error": "<message>"}.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from points_bank import errors
from points_bank.logging_config import get_logger

logger = get_logger("points_bank.api.errors")

STATUS_BY_ERROR = {
    errors.InvalidRequest: 400,
    errors.SelfTransfer: 400,
    errors.InsufficientFunds: 400,
    errors.DuplicateError: 400,
    errors.SelfLookup: 400,
    errors.Unauthenticated: 401,
    errors.RecipientNotFound: 404,
    errors.NotFound: 404,
    errors.TransferFailed: 500,
}


def status_for(exc: errors.PointsError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


async def points_error_handler(request: Request, exc: errors.PointsError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Invalid payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "invalid payload"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.PointsError, points_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
