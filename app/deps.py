"""FastAPI dependencies shared by the routers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.services.storage import FleetStorage, MemoryStorage, SqlStorage

_memory_storage = None


def get_memory_storage() -> MemoryStorage:
    """Process-wide in-memory store (STORAGE_BACKEND=memory)."""
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = MemoryStorage()
    return _memory_storage


def get_storage(db: Session = Depends(get_db)) -> FleetStorage:
    if settings.STORAGE_BACKEND == "memory":
        return get_memory_storage()
    return SqlStorage(db)
