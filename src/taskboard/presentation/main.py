from __future__ import annotations

from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di, get_orm
from src.setup.logging_config import configure_logging

# Configure DI once at process start
_settings = get_api_settings()
configure_logging(_settings.LOG_LEVEL)
configure_di(_settings)

app = FastAPI(
    title=_settings.APP_NAME,
    version=_settings.APP_VERSION,
    description="Task tracking API with type-based task rules",
)


async def _create_schema() -> None:
    await get_orm().create_schema()


async def _dispose_engine() -> None:
    await get_orm().dispose()


if _settings.STORAGE_BACKEND == "sql":
    app.add_event_handler("startup", _create_schema)
    app.add_event_handler("shutdown", _dispose_engine)

# Routes build their services on import, so DI must be configured first.
from src.taskboard.presentation.routes import router as api_router  # noqa: E402

app.include_router(api_router, prefix=_settings.API_PREFIX)
