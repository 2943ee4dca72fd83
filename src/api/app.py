import logging
import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .error import ClientError, http_error, map_error, unexpected_error, validation_error

logger = logging.getLogger(__name__)


def _error_response(error, headers=None) -> JSONResponse:
    status_code, body = map_error(error)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: code={exc.base_error.code} message={exc.base_error.message}")
    return _error_response(exc.base_error)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    error = validation_error(exc)
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {error.message}")
    return _error_response(error)


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    return _error_response(http_error(exc), headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__} - {exc}",
        exc_info=exc,
    )
    return _error_response(unexpected_error(exc))


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title="Task Manager API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

    from src.api.routes import health_check, tasks

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(tasks.router, tags=["Tasks"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    # Served by Starlette's outermost error middleware, outside CORSMiddleware,
    # so 500 responses carry no CORS headers.
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
