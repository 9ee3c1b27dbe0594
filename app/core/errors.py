from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.core.exceptions import InvalidJSONError, UsersApiError
from app.schemas.response import ErrorResponse

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI):
    """
    Registers exception handlers with the FastAPI app.
    Every error body has the envelope shape {success, error, message}.
    """
    @app.exception_handler(InvalidJSONError)
    async def invalid_json_handler(request: Request, exc: InvalidJSONError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.message,
                message="Request body contains invalid JSON"
            ).model_dump()
        )

    @app.exception_handler(UsersApiError)
    async def users_api_exception_handler(request: Request, exc: UsersApiError):
        logger.warning(f"{exc.code}: {exc.message}", extra={"path": request.url.path})
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.message,
                message=exc.code
            ).model_dump()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handles standard HTTP exceptions (404, 405, etc.)
        """
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content=ErrorResponse(
                    error="Endpoint not found",
                    message=f"The endpoint {request.method} {request.url.path} was not found"
                ).model_dump()
            )

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=str(exc.detail),
                message=f"{request.method} {request.url.path} could not be processed"
            ).model_dump(),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions. Details go to the log, never the client.
        """
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else "unknown"
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                message="Something went wrong on the server"
            ).model_dump()
        )
