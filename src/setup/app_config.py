from __future__ import annotations

import logging

import inject

from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.db_config import get_database_settings
from src.taskboard.domain.repositories import StorageRepository
from src.taskboard.infrastructure.memory.repository import InMemoryStorageRepository
from src.taskboard.infrastructure.sql.orm import SqlOrm
from src.taskboard.infrastructure.sql.repositories import SqlStorageRepository

logger = logging.getLogger(__name__)

_orm: SqlOrm | None = None


def get_orm() -> SqlOrm:
    """Return the process-wide ORM holder, creating it on first use."""
    global _orm
    if _orm is None:
        settings = get_database_settings()
        _orm = SqlOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    return _orm


def build_storage(settings: ApiSettings | None = None) -> StorageRepository:
    if settings is None:
        settings = get_api_settings()
    if settings.STORAGE_BACKEND == "sql":
        return SqlStorageRepository(get_orm())
    return InMemoryStorageRepository()


def configure_di(settings: ApiSettings | None = None) -> None:
    """Bind the storage repository once per process."""
    if inject.is_configured():
        return

    storage = build_storage(settings)
    logger.info("Configured task storage", extra={"storage": type(storage).__name__})

    def _config(binder: inject.Binder) -> None:
        binder.bind(StorageRepository, storage)

    inject.configure(_config)
