# app\adapters\api\main.py
import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.container import container
from app.shared.config import settings, AppEnv
from app.shared.logging_config import configure_logging
from app.core.domain.exceptions import EntityNotFoundError, InvalidPayloadError
from app.core.use_cases.parsing import format_errors

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from app.adapters.api.routers import system, users

logger = structlog.get_logger()

HTTP_422_UNPROCESSABLE = 422

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Builds the store eagerly so seeding happens before the first request.
    2. Shutdown: Nothing to release; state is in-memory only.
    """
    store = container.user_store()
    logger.info(
        "app_startup",
        app=settings.APP_NAME,
        env=settings.APP_ENV.value,
        users=store.count(),
    )

    yield

    logger.info("app_shutdown")

def _register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the service as {"message": ...} with an explicit status."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed path parameters or unreadable JSON bodies."""
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={
                "message": "Request validation failed",
                "errors": format_errors(exc.errors()),
            },
        )

    # Handlers normally translate these into responses; these cover a route that lets one escape.
    @app.exception_handler(EntityNotFoundError)
    async def not_found_exception_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exc.message},
        )

    @app.exception_handler(InvalidPayloadError)
    async def invalid_payload_exception_handler(request: Request, exc: InvalidPayloadError):
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={"message": exc.message, "errors": exc.errors},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc) if settings.DEBUG else "Internal Server Error"},
        )

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    # Wire the Container
    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=["app.adapters.api.dependencies"])

    docs_enabled = settings.APP_ENV != AppEnv.PRODUCTION

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="In-memory users resource (Hexagonal Architecture)",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
    )
    app.state.started_at = time.monotonic()

    # Global Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Register Routers
    app.include_router(system.router)
    app.include_router(users.router, prefix=settings.api_root)

    return app

# Entry point for local debugging (e.g. `python -m app.adapters.api.main`)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.adapters.api.main:create_app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        factory=True
    )
