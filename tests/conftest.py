import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from todo_list_api.infrastructure.config.main_settings import Settings
from todo_list_api.infrastructure.entrypoints.api.app_factory import create_app
from todo_list_api.infrastructure.persistence import Database

IN_MEMORY_SQLITE = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="TestTodo",
        env="test",
        database_url=IN_MEMORY_SQLITE,
    )


@pytest_asyncio.fixture
async def database(settings: Settings):
    db = Database(settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan, which creates the schema
    with TestClient(app) as test_client:
        yield test_client
