"""Record storage implementations"""

from typing import Optional

from frontdesk.config import settings
from frontdesk.storage.base import BaseRecordStore, Record, RecordResult
from frontdesk.storage.sql import SQLAlchemyRecordStore
from frontdesk.storage.http import HttpRecordStore


def create_store(backend: Optional[str] = None) -> BaseRecordStore:
    """Build the configured record store"""
    backend = backend or settings.storage_backend

    if backend == "sql":
        from frontdesk.database import SessionLocal
        return SQLAlchemyRecordStore(SessionLocal)
    if backend == "http":
        return HttpRecordStore()

    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    "BaseRecordStore",
    "Record",
    "RecordResult",
    "SQLAlchemyRecordStore",
    "HttpRecordStore",
    "create_store",
]
