import uvicorn

from todo_list_api.infrastructure.config.main_settings import Settings
from todo_list_api.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "todo_list_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
