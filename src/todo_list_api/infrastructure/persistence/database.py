"""Async engine and session factory for the task store."""

from pathlib import Path

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from todo_list_api.infrastructure.config.main_settings import Settings
from todo_list_api.infrastructure.observability.logger_factory_service import get_logger
from todo_list_api.infrastructure.persistence.models import Base

logger = get_logger("database")


class Database:
    def __init__(self, settings: Settings) -> None:
        url = make_url(settings.database_url)
        self.engine = create_async_engine(url, echo=settings.database_echo, **_engine_options(url))
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine, expire_on_commit=False
        )
        self._backend = url.get_backend_name()

    async def create_schema(self) -> None:
        """Create missing tables from the ORM metadata. Existing tables are left alone."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready", db_backend=self._backend)

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error(
                "Database ping failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed", db_backend=self._backend)


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _engine_options(url: URL) -> dict:
    if _is_memory_sqlite(url):
        # one shared connection, otherwise every checkout sees an empty database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    if url.get_backend_name() == "sqlite" and url.database:
        Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return {}
