"""Exception handlers — map domain errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_registry.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    RecordValidationError,
)

logger = logging.getLogger(__name__)


async def record_validation_handler(request: Request, exc: RecordValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "field": exc.field},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are invalid input (400); an unparseable id matches no row (404)."""
    errors = exc.errors()
    if errors and all(tuple(err.get("loc", ()))[:1] == ("path",) for err in errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "User not found."},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request.", "errors": jsonable_encoder(errors)},
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": f"{exc.entity_type} not found."},
    )


async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    content = {"message": exc.message}
    if exc.detail is not None:
        content["error"] = exc.detail
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all so an unexpected failure still produces a response."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordValidationError, record_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(PersistenceError, persistence_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
