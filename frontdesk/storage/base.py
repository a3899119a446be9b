"""Base record store interface"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from frontdesk.errors import FieldError

Record = Dict[str, Any]


class RecordResult(BaseModel):
    """Outcome of one record in a create/update/delete batch"""
    success: bool
    record: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = []
    message: Optional[str] = None
    not_found: bool = False


class BaseRecordStore(ABC):
    """
    Abstract record storage collaborator.

    Records are flat field maps keyed by backend (snake_case) field names.
    All ids crossing this boundary are integers.
    """

    @abstractmethod
    async def fetch_all(
        self,
        collection: str,
        fields: Optional[Iterable[str]] = None,
    ) -> List[Record]:
        """Return every record of a collection, raising TransportFailure on error"""
        pass

    @abstractmethod
    async def fetch_by_id(
        self,
        collection: str,
        record_id: int,
        fields: Optional[Iterable[str]] = None,
    ) -> Optional[Record]:
        """Return one record or None when it does not exist"""
        pass

    @abstractmethod
    async def create_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        pass

    @abstractmethod
    async def update_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        """Apply partial updates; every record must carry an ``id``"""
        pass

    @abstractmethod
    async def delete_records(
        self,
        collection: str,
        ids: List[int],
    ) -> List[RecordResult]:
        pass

    async def close(self) -> None:
        """Release any held resources"""
        return None

    @staticmethod
    def _select_fields(record: Record, fields: Optional[Iterable[str]]) -> Record:
        if not fields:
            return record
        wanted = set(fields) | {"id"}
        return {key: value for key, value in record.items() if key in wanted}
