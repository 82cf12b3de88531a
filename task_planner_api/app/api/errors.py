"""
Translation of domain errors into HTTP responses.

Handlers are registered once on the application; endpoint functions
never catch ``ValidationError`` or ``NotFoundError`` themselves.
Any other exception is left to FastAPI's default handling.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import NotFoundError, ValidationError


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
