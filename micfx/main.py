import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from micfx.config import Settings, get_settings
from micfx.infrastructure.logging_config import configure_logging
from micfx.interfaces.api.errors import register_exception_handlers
from micfx.interfaces.api.middleware import add_security_middleware
from micfx.interfaces.api.routes import register_routes
from micfx.interfaces.web import STATIC_DIR

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        logger.info(
            "Starting %s in %s environment", settings.app_name, settings.environment
        )
        yield
        logger.info("Stopping %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.is_development,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    register_routes(app)

    if not settings.is_development:
        register_exception_handlers(app)
        add_security_middleware(app, settings)

    return app


app = create_app()
