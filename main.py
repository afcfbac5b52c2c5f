import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rulechain.config import get_settings
from rulechain.infrastructure.database import engine, initialize_database
from rulechain.interfaces.api.routes import register_routes


def configure_logging() -> None:
    """Apply the configured log level to the application loggers."""

    level = get_settings().log_level.upper()
    logging.basicConfig(
        level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    logging.getLogger("rulechain").setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables on startup and release the engine on shutdown."""

    configure_logging()
    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="rulechain", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
