from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and `.env`."""

    app_name: str = Field(default="Todo List API", alias="APP_NAME")
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ── Persistence ──
    database_url: str = Field(
        default="sqlite+aiosqlite:///./runtime_data/todo_list.db", alias="DATABASE_URL"
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        """Accept lowercase level names from .env."""
        return str(value).upper() if value else "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
