"""Staff Directory - API error responses and exception handlers."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.services.pagination import NoSuchSortableFieldError

logger = logging.getLogger(__name__)


def error_response(code: str, message: str, field_errors: list[dict] | None = None, meta: dict | None = None) -> dict:
    return {
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "field_errors": field_errors or []
        },
        "meta": meta
    }


async def no_such_sortable_field_handler(request: Request, exc: NoSuchSortableFieldError) -> JSONResponse:
    """400 with a field-name -> message map, e.g. {"sortBy": "Can not sort by 'x'"}."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.field_errors)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_response("CONFLICT", "Request violates a uniqueness or integrity constraint"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoSuchSortableFieldError, no_such_sortable_field_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
