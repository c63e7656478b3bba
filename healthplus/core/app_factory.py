"""
Application factory for FastAPI.

Builds the portal API: lifespan, middleware, exception handlers, routes and
the health endpoint.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthplus.api.exception_handlers import register_exception_handlers
from healthplus.api.middleware.request_logging import RequestLoggingMiddleware
from healthplus.api.router import api_router
from healthplus.config.settings import Settings, get_settings
from healthplus.core.lifecycle import PortalLifecycle, build_lifespan
from healthplus.infrastructure import IdentifierSource, KeyValueStorage

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        ids: IdentifierSource | None = None,
        storage: KeyValueStorage | None = None,
    ) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
            ids: Clock and identifier source for the portal
            storage: Storage for the persisted user and cart
        """
        self._settings = settings or get_settings()
        self._lifecycle = PortalLifecycle(self._settings, ids=ids, storage=storage)

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        """Create the base FastAPI application with lifespan."""
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=build_lifespan(self._lifecycle),
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if self._settings.DEBUG else [],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        app.add_middleware(RequestLoggingMiddleware)

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        """Register exception handlers."""
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        """Configure API routes (with /api/v1 prefix)."""
        app.include_router(api_router, prefix=self._settings.API_V1_STR)

        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
            }


def create_app(
    settings: Settings | None = None,
    ids: IdentifierSource | None = None,
    storage: KeyValueStorage | None = None,
) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override
        ids: Optional clock and identifier source
        storage: Optional storage override

    Returns:
        Configured FastAPI application
    """
    factory = AppFactory(settings, ids=ids, storage=storage)
    return factory.create_app()
