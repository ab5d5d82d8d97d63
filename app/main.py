import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.core.exceptions import NotFoundError, OperationFailedError, ValidationFailedError
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.core.responses import error_response
from app.database import Base, engine
from app import models  # noqa: F401
from app.routers import (
    currencies_router,
    health_router,
    product_prices_router,
    products_router,
)

logger = logging.getLogger(__name__)

setup_logging()
settings: Settings = get_settings()
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health_router)
app.include_router(currencies_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(product_prices_router, prefix=settings.API_PREFIX)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_request: Request, exc: RequestValidationError):
    failed = ValidationFailedError.from_pydantic(exc.errors())
    return error_response("Validation failed", status_code=422, errors=failed.errors)


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(_request: Request, exc: ValidationFailedError):
    return error_response("Validation failed", status_code=422, errors=exc.errors)


@app.exception_handler(NotFoundError)
async def not_found_handler(_request: Request, exc: NotFoundError):
    return error_response(str(exc), status_code=404)


@app.exception_handler(OperationFailedError)
async def operation_failed_handler(_request: Request, exc: OperationFailedError):
    logger.error("%s: %s", exc.message, exc.cause, exc_info=exc.cause)
    return error_response(exc.message, status_code=500, error=str(exc.cause))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response("Unexpected error", status_code=500, error=str(exc))


__all__ = ["app"]
