from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Request

router = APIRouter()

SERVICE_NAME = "todo-list-api"


@router.get("/health")
async def health_check(request: Request):
    try:
        app_version = version(SERVICE_NAME)
    except PackageNotFoundError:
        app_version = "0.0.0"

    database_ok = await request.app.state.database.ping()
    return {
        "status": "ok" if database_ok else "degraded",
        "service": SERVICE_NAME,
        "version": app_version,
        "database": "up" if database_ok else "down",
    }
