"""SQLAlchemy-backed record store"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import inspect, select
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
import structlog

from frontdesk.errors import FieldError, TransportFailure
from frontdesk.models import COLLECTIONS
from frontdesk.storage.base import BaseRecordStore, Record, RecordResult

logger = structlog.get_logger()


def _is_record_error(exc: SQLAlchemyError) -> bool:
    """True when the record contents were rejected rather than the database being unavailable"""
    if isinstance(exc, (IntegrityError, DataError)):
        return True
    return not isinstance(exc, DBAPIError)


class SQLAlchemyRecordStore(BaseRecordStore):
    """Record store over the async SQLAlchemy models in ``frontdesk.models``"""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    def _model(self, collection: str):
        model = COLLECTIONS.get(collection)
        if model is None:
            raise ValueError(f"Unknown collection: {collection}")
        return model

    @staticmethod
    def _columns(model) -> Dict[str, str]:
        """Map wire field name -> mapped attribute name"""
        mapper = inspect(model)
        return {
            column.name: mapper.get_property_by_column(column).key
            for column in model.__table__.columns
        }

    def _to_record(self, obj) -> Record:
        return {
            name: getattr(obj, key)
            for name, key in self._columns(type(obj)).items()
        }

    def _missing_required(self, model, record: Record) -> List[FieldError]:
        errors = []
        for column in model.__table__.columns:
            if column.primary_key or column.nullable:
                continue
            if column.default is not None or column.server_default is not None:
                continue
            if record.get(column.name) is None:
                errors.append(FieldError(field=column.name, message="This field is required"))
        return errors

    async def fetch_all(
        self,
        collection: str,
        fields: Optional[Iterable[str]] = None,
    ) -> List[Record]:
        model = self._model(collection)
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(model).order_by(model.id))
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Record fetch failed", collection=collection, error=str(e))
            raise TransportFailure(f"Failed to fetch {collection} records") from e

        return [self._select_fields(self._to_record(row), fields) for row in rows]

    async def fetch_by_id(
        self,
        collection: str,
        record_id: int,
        fields: Optional[Iterable[str]] = None,
    ) -> Optional[Record]:
        model = self._model(collection)
        try:
            async with self.session_factory() as session:
                obj = await session.get(model, record_id)
        except SQLAlchemyError as e:
            logger.error("Record fetch failed", collection=collection, record_id=record_id, error=str(e))
            raise TransportFailure(f"Failed to fetch {collection} record") from e

        if obj is None:
            return None
        return self._select_fields(self._to_record(obj), fields)

    async def create_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        model = self._model(collection)
        columns = self._columns(model)
        results = []

        async with self.session_factory() as session:
            for record in records:
                errors = self._missing_required(model, record)
                if errors:
                    results.append(RecordResult(success=False, errors=errors, message="Missing required fields"))
                    continue

                values = {
                    columns[name]: value
                    for name, value in record.items()
                    if name in columns and name != "id"
                }
                obj = model(**values)
                try:
                    session.add(obj)
                    await session.commit()
                    await session.refresh(obj)
                except SQLAlchemyError as e:
                    await session.rollback()
                    if not _is_record_error(e):
                        raise TransportFailure(f"Failed to create {collection} records") from e
                    logger.warning("Record rejected", collection=collection, error=str(e))
                    results.append(RecordResult(success=False, message=str(e)))
                    continue

                results.append(RecordResult(success=True, record=self._to_record(obj)))

        return results

    async def update_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        model = self._model(collection)
        columns = self._columns(model)
        results = []

        async with self.session_factory() as session:
            for record in records:
                record_id = record.get("id")
                try:
                    obj = await session.get(model, record_id)
                except SQLAlchemyError as e:
                    raise TransportFailure(f"Failed to update {collection} records") from e

                if obj is None:
                    results.append(RecordResult(success=False, not_found=True, message="Record not found"))
                    continue

                for name, value in record.items():
                    if name in columns and name != "id":
                        setattr(obj, columns[name], value)

                try:
                    await session.commit()
                    await session.refresh(obj)
                except SQLAlchemyError as e:
                    await session.rollback()
                    if not _is_record_error(e):
                        raise TransportFailure(f"Failed to update {collection} records") from e
                    logger.warning("Record rejected", collection=collection, record_id=record_id, error=str(e))
                    results.append(RecordResult(success=False, message=str(e)))
                    continue

                results.append(RecordResult(success=True, record=self._to_record(obj)))

        return results

    async def delete_records(
        self,
        collection: str,
        ids: List[int],
    ) -> List[RecordResult]:
        model = self._model(collection)
        results = []

        async with self.session_factory() as session:
            for record_id in ids:
                try:
                    obj = await session.get(model, record_id)
                    if obj is None:
                        results.append(RecordResult(success=False, not_found=True, message="Record not found"))
                        continue
                    record = self._to_record(obj)
                    await session.delete(obj)
                    await session.commit()
                except SQLAlchemyError as e:
                    await session.rollback()
                    raise TransportFailure(f"Failed to delete {collection} records") from e

                results.append(RecordResult(success=True, record=record))

        return results
