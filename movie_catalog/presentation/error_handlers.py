"""Translate exceptions into ``ApiErrorResponse`` bodies.

Domain errors carry no HTTP knowledge; the mapping to status codes lives here:

* ``NotFoundError`` -> 404
* ``AlreadyExistsError`` -> 409
* ``ValidationError`` and FastAPI's ``RequestValidationError`` -> 400
* anything else -> 500
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_catalog.applications.interfaces.dtos.api_error import ApiErrorResponse
from movie_catalog.domain.exceptions import AlreadyExistsError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _error_response(status: HTTPStatus, message: str) -> JSONResponse:
    body = ApiErrorResponse.from_status(status, message)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


def _field_name(loc) -> str:
    names = [str(part) for part in loc if isinstance(part, str)]
    return names[-1] if names else "request"


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(HTTPStatus.NOT_FOUND, str(exc))


async def already_exists_handler(request: Request, exc: AlreadyExistsError) -> JSONResponse:
    return _error_response(HTTPStatus.CONFLICT, str(exc))


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return _error_response(HTTPStatus.BAD_REQUEST, f"Validation failed: {exc}")


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", "Invalid value"))
    return await validation_error_handler(request, ValidationError(errors))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(HTTPStatus.INTERNAL_SERVER_ERROR, f"An unexpected error occurred: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AlreadyExistsError, already_exists_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
