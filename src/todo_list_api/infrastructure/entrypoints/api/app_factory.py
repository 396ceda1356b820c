from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo_list_api.infrastructure.config.main_settings import Settings
from todo_list_api.infrastructure.config.resolution.container import build_database
from todo_list_api.infrastructure.entrypoints.api.error_handlers import (
    register_exception_handlers,
)
from todo_list_api.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from todo_list_api.infrastructure.entrypoints.api.tasks_router import (
    router as tasks_router,
)
from todo_list_api.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from todo_list_api.infrastructure.observability.logging import CorrelationMiddleware

logger = get_logger("app_factory")


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"Database backend: {settings.database_url.split(':', 1)[0]}")
    logger.info("------------------------")

    database = build_database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await database.create_schema()
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app
