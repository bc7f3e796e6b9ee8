from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import (
    DomainError,
    DuplicateKeyError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    UnsupportedUserTypeError,
    ValidationError,
)
from app.logger_config import logger

# Most specific classes first
DOMAIN_STATUS_CODES = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (DuplicateKeyError, status.HTTP_400_BAD_REQUEST),
    (UnsupportedUserTypeError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(error: DomainError) -> int:
    for error_type, status_code in DOMAIN_STATUS_CODES:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _server_error_body(message: str, error: Exception) -> dict:
    body = {
        "success": False,
        "message": message,
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }
    # Raw error text stays in the logs for production deployments
    if not settings.is_production:
        body["details"] = str(error)
    return body


def register_error_handlers(app: FastAPI):
    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, e: DomainError):
        status_code = status_code_for(e)
        if status_code >= 500:
            logger.exception(f"Storage failure on {request.method} {request.url.path}")
            return JSONResponse(status_code=status_code, content=_server_error_body("Internal Server Error", e))

        logger.info(f"{request.method} {request.url.path} rejected with {status_code}: {e}")
        return JSONResponse(
            status_code=status_code,
            content={
                "success": False,
                "message": str(e),
                "status_code": status_code,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, e: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
                "message": error.get("msg", ""),
            }
            for error in e.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": "Invalid request data",
                "status_code": status.HTTP_400_BAD_REQUEST,
                "errors": errors,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, e: StarletteHTTPException):
        return JSONResponse(
            status_code=e.status_code,
            content={
                "success": False,
                "message": e.detail,
                "status_code": e.status_code,
            },
            headers=getattr(e, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_exception(request: Request, e: Exception):
        # Log the exception with traceback
        logger.exception("Unhandled exception occurred")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_server_error_body("Internal Server Error", e),
        )
