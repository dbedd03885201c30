"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ulidkit import __version__
from ulidkit.api.routes import health, ids
from ulidkit.config import load_config
from ulidkit.core.generator import get_generator
from ulidkit.internal.health import check_event_loop, create_generator_check, get_health_checker
from ulidkit.internal.logging import LogLevel, StructuredLogger, get_logger
from ulidkit.utils.crash import create_async_handler


def create_app(config=None, generator=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])
    logger_instance = get_logger("api")

    generator = generator or get_generator()
    health_checker = get_health_checker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=__version__)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        yield
        logger_instance.info("Application shutdown complete", issued=generator.issued)

    app = FastAPI(
        title="ULID Service",
        version=__version__,
        description="monotonic ULID generation and binary conversion",
        lifespan=lifespan,
    )

    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("generator", create_generator_check(generator), critical=True)

    # Initialize route modules with dependencies
    ids.init(generator, config.generator.max_batch)
    health.init(generator, health_checker)

    app.include_router(ids.router)
    app.include_router(health.router)

    return app
