import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from password_gate.config import get_settings
from password_gate.validator import get_validator
from password_gate.api.routes.password import router as password_router
from password_gate.api.routes.system import router as system_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logger.info("Starting password-gate API")

    # Build the policy now so bad config fails at startup, not on first request
    config = get_validator().config
    logger.info(
        "Password policy loaded: length %d-%d, %d/4 classes, max repeat %d, "
        "%d denylisted, %d banned words",
        config.min_length, config.max_length, config.min_classes_required,
        config.max_consecutive_repeat, len(config.denylist),
        len(config.banned_substrings),
    )

    yield

    logger.info("Shutting down password-gate API")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Password Gate",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(system_router, prefix="/api")
    app.include_router(password_router, prefix="/api")
    return app


app = create_app()


def main():
    """Entry point for password-gate-api script."""
    settings = get_settings()
    uvicorn.run(
        "password_gate.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
