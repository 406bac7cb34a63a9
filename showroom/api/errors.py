"""
Error mapping for the HTTP layer.

- request validation failures -> 400 with the per-field violations
- cross-field violations found against the stored row -> 400, same shape
- uniqueness conflicts -> 409 naming the offending field
- any other persistence/unexpected failure -> 500 with a generic message;
  the cause is logged, never returned
"""
import logging

from fastapi import FastAPI, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.requests import Request
from starlette.responses import JSONResponse

from showroom.db.repositories.common import DuplicateRecordError, InvalidRecordError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def _conflict_detail(exc: DuplicateRecordError) -> dict:
    return jsonable_encoder({"message": str(exc), "field": exc.field, "value": exc.value})


def conflict(exc: DuplicateRecordError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=_conflict_detail(exc),
    )


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        {"detail": jsonable_encoder(errors)},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _invalid_record_handler(request: Request, exc: InvalidRecordError):
    return JSONResponse(
        {"detail": [{"field": exc.field, "message": exc.message, "type": "value_error"}]},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _duplicate_record_handler(request: Request, exc: DuplicateRecordError):
    return JSONResponse(
        {"detail": _conflict_detail(exc)},
        status_code=status.HTTP_409_CONFLICT,
    )


async def _persistence_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(
        "persistence_error: method=%s path=%s", request.method, request.url.path
    )
    return JSONResponse(
        {"detail": GENERIC_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def _unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(
        "unhandled_error: method=%s path=%s", request.method, request.url.path
    )
    return JSONResponse(
        {"detail": GENERIC_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(InvalidRecordError, _invalid_record_handler)
    app.add_exception_handler(DuplicateRecordError, _duplicate_record_handler)
    app.add_exception_handler(SQLAlchemyError, _persistence_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
