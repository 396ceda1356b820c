from todo_list_api.infrastructure.config.main_settings import Settings


def test_defaults(monkeypatch):
    for key in ("APP_NAME", "APP_ENV", "LOG_LEVEL", "DATABASE_URL", "DATABASE_ECHO"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Todo List API"
    assert settings.env == "local"
    assert settings.log_level == "INFO"
    assert settings.database_url.startswith("sqlite+aiosqlite:///")
    assert settings.database_echo is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/todo")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATABASE_ECHO", "true")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql+asyncpg://u:p@db/todo"
    assert settings.log_level == "DEBUG"
    assert settings.database_echo is True
