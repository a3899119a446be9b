"""Shared CRUD plumbing for the entity managers"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
import structlog

from frontdesk.dates import Clock, local_now
from frontdesk.errors import FieldError, FrontdeskError, NotFound, TransportFailure, ValidationFailure
from frontdesk.normalizer import FieldMap, coerce_id
from frontdesk.storage.base import BaseRecordStore, RecordResult

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)
SchemaT = TypeVar("SchemaT", bound=BaseModel)


class RecordManager(Generic[ModelT]):
    """
    Base class for the per-entity managers.

    Mutations log and re-raise every failure. Reads degrade to empty results
    unless called with ``strict=True``.
    """

    fields: FieldMap
    model: Type[ModelT]

    def __init__(self, store: BaseRecordStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or local_now

    @property
    def entity(self) -> str:
        return self.fields.entity

    @property
    def collection(self) -> str:
        return self.fields.collection

    def now(self) -> datetime:
        return self.clock()

    def _to_model(self, record: Mapping[str, Any]) -> ModelT:
        try:
            return self.model.model_validate(self.fields.to_canonical(record))
        except ValidationError as e:
            logger.error(
                f"Unreadable {self.collection} record",
                record_id=record.get("id"),
                errors=e.error_count(),
            )
            raise TransportFailure(f"Storage returned an unreadable {self.entity.lower()} record") from e

    @staticmethod
    def _validate(schema: Type[SchemaT], data: Any) -> SchemaT:
        """Validate caller input at the manager boundary"""
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ValidationFailure.from_pydantic(e) from e

    @staticmethod
    def _dump(payload: BaseModel, exclude_unset: bool = False) -> Dict[str, Any]:
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)

    def _check(self, results: List[RecordResult], record_id: Any = None) -> RecordResult:
        if not results:
            raise TransportFailure(f"Storage returned no result for {self.entity.lower()}")
        result = results[0]
        if result.success:
            return result
        if result.not_found:
            raise NotFound(self.entity, record_id)
        errors = result.errors or [FieldError(field="__root__", message=result.message or "Rejected by storage")]
        raise ValidationFailure(errors, result.message)

    async def _fetch_all(self) -> List[ModelT]:
        records = await self.store.fetch_all(self.collection, self.fields.backend_fields)
        return [self._to_model(record) for record in records]

    async def list(self, strict: bool = False) -> List[ModelT]:
        """All records in storage order"""
        try:
            return await self._fetch_all()
        except FrontdeskError as e:
            if strict:
                raise
            logger.error(f"Failed to load {self.collection} records", error=e.message)
            return []

    async def _require(self, record_id: Any) -> ModelT:
        """Fetch one record or raise NotFound"""
        record = await self.store.fetch_by_id(
            self.collection,
            coerce_id(record_id, self.entity),
            self.fields.backend_fields,
        )
        if record is None:
            raise NotFound(self.entity, record_id)
        return self._to_model(record)

    async def get(self, record_id: Any) -> Optional[ModelT]:
        """One record, or None when it is missing or cannot be loaded"""
        try:
            return await self._require(record_id)
        except NotFound:
            return None
        except FrontdeskError as e:
            logger.error(f"Failed to load {self.collection} record", record_id=record_id, error=e.message)
            return None

    async def _create(self, values: Mapping[str, Any]) -> ModelT:
        try:
            results = await self.store.create_records(self.collection, [self.fields.to_backend(values)])
            result = self._check(results)
            if result.record is None:
                raise TransportFailure(f"Storage did not return the created {self.entity.lower()}")
        except FrontdeskError as e:
            logger.error(f"Failed to create {self.entity.lower()}", error=e.message)
            raise

        record = self._to_model(result.record)
        logger.info(f"{self.entity} created", record_id=record.id)
        return record

    async def _update(self, record_id: Any, values: Mapping[str, Any]) -> ModelT:
        try:
            record_id = coerce_id(record_id, self.entity)
            patch = self.fields.to_backend(values)
            patch["id"] = record_id
            results = await self.store.update_records(self.collection, [patch])
            result = self._check(results, record_id)
            if result.record is None:
                return await self._require(record_id)
        except FrontdeskError as e:
            logger.error(f"Failed to update {self.entity.lower()}", record_id=record_id, error=e.message)
            raise

        logger.info(f"{self.entity} updated", record_id=record_id, fields=sorted(values))
        return self._to_model(result.record)

    async def delete(self, record_id: Any) -> Optional[ModelT]:
        """Delete a record, returning it when the storage echoes it back"""
        try:
            record_id = coerce_id(record_id, self.entity)
            results = await self.store.delete_records(self.collection, [record_id])
            result = self._check(results, record_id)
        except FrontdeskError as e:
            logger.error(f"Failed to delete {self.entity.lower()}", record_id=record_id, error=e.message)
            raise

        logger.info(f"{self.entity} deleted", record_id=record_id)
        return self._to_model(result.record) if result.record else None

    @staticmethod
    def _matches(term: Optional[str], *values: Any) -> bool:
        """Case-insensitive substring search across values"""
        if not term:
            return True
        needle = term.strip().lower()
        return any(needle in str(value).lower() for value in values if value is not None)
