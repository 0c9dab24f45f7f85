"""Translate domain errors into HTTP responses.

Paths under ``/api`` answer with JSON. Everything else is a page and gets
the HTML error template.
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from gym_admin.core.errors import NotFoundError, ReferentialIntegrityError, ValidationError
from gym_admin.schemas import GymClassCreate, MemberCreate, TrainerCreate
from gym_admin.web.templating import render_error

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Service errors are keyed by field name, API clients see the JSON names
WIRE_NAMES = {
    name: field.alias or name
    for model in (TrainerCreate, MemberCreate, GymClassCreate)
    for name, field in model.model_fields.items()
}


def _is_api(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def _request_errors(exc: RequestValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    if _is_api(request):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})
    return render_error(request, status.HTTP_404_NOT_FOUND, exc.message)


async def validation_error_handler(request: Request, exc: ValidationError) -> Response:
    if _is_api(request):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": exc.message,
                "errors": {WIRE_NAMES.get(k, k): v for k, v in exc.errors.items()},
            },
        )
    return render_error(request, status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        # A malformed or out-of-range id cannot name an existing row
        message = f"No resource at {request.url.path}"
        if _is_api(request):
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": message})
        return render_error(request, status.HTTP_404_NOT_FOUND, message)

    errors = _request_errors(exc)
    if _is_api(request):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid input", "errors": errors},
        )
    return render_error(request, status.HTTP_400_BAD_REQUEST, "Invalid request")


async def integrity_error_handler(request: Request, exc: ReferentialIntegrityError) -> Response:
    if _is_api(request):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})
    return render_error(request, status.HTTP_409_CONFLICT, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ReferentialIntegrityError, integrity_error_handler)
