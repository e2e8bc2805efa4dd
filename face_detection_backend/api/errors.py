"""Exception handlers that give every error response the ``{"error": ...}`` shape"""

# Standard library imports
import logging
from typing import Any, Dict, Sequence

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..application.dto.common_dto import ErrorResponse, ValidationErrorDetail, ValidationErrorResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")
_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def _field_name(location: Sequence[Any]) -> str:
    parts = list(location)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def _clean_message(message: str) -> str:
    if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        return message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
    return message


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> ValidationErrorResponse:
    """
    Flatten pydantic errors into ``[{field, message}]``.

    Args:
        errors: ``RequestValidationError.errors()`` output

    Returns:
        ValidationErrorResponse with one detail per error
    """
    return ValidationErrorResponse(
        details=[
            ValidationErrorDetail(
                field=_field_name(error.get("loc", ())),
                message=_clean_message(str(error.get("msg", "Invalid value"))),
            )
            for error in errors
        ]
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = format_validation_errors(exc.errors())
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {len(body.details)} error(s)")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
