"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notaire.config.settings import Settings, get_settings
from notaire.di import initialize_container, shutdown_container
from notaire.domain.exceptions import NotaireException
from notaire.infrastructure.monitoring import get_logger, setup_logging
from notaire.presentation.api.middleware import (
    RequestIDMiddleware,
    notaire_exception_handler,
)
from notaire.presentation.api.routes import auth, health, verification


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating {settings.APP_NAME} application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.APP_NAME} application...")
        await initialize_container()
        logger.info(f"{settings.APP_NAME} application started successfully")

        yield

        logger.info(f"Shutting down {settings.APP_NAME} application...")
        await shutdown_container()
        logger.info(f"{settings.APP_NAME} application shutdown complete")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Wallet authentication and token-burn verification",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # Middleware chain: request ID first, CORS last
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotaireException, notaire_exception_handler)

    app.include_router(health.router)
    app.include_router(auth.router, prefix="/api")
    app.include_router(verification.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": settings.APP_VERSION,
        }

    logger.info(f"{settings.APP_NAME} application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Create application instance.

    For uvicorn: uvicorn notaire.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "notaire.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
    )


if __name__ == "__main__":
    main()
