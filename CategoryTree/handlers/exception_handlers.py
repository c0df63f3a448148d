from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from CategoryTree.exceptions import (
    CategoryTreeException,
    get_http_status_code,
)
from CategoryTree.schemas.response import ResponseSchema


def register_exception_handlers(app):
    """Register all exception handlers for the FastAPI app."""

    @app.exception_handler(CategoryTreeException)
    async def category_tree_exception_handler(request: Request, exc: CategoryTreeException):
        """Render domain errors as a ResponseSchema body carrying their details."""
        status_code = get_http_status_code(exc)

        return JSONResponse(
            status_code=status_code,
            content=ResponseSchema(
                status="error", message=exc.message, data=exc.details if exc.details else None
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed request bodies never reach the service
        errors = exc.errors()

        messages = []
        for error in errors:
            loc = error.get("loc")
            msg = error.get("msg")
            typ = error.get("type")
            messages.append(f"Error in {loc}: {msg} ({typ})")

        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content=ResponseSchema(status="error", message="Validation error", data=messages).model_dump(),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # For all HTTP exceptions, use the ResponseSchema format
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseSchema(
                status="error", message=exc.detail if isinstance(exc.detail, str) else str(exc.detail), data=None
            ).model_dump(),
        )
