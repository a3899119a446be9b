"""
Record normalization between UI field names and backend field names.

The UI shape uses camelCase keys (``tableNumber``), the storage backend uses
snake_case keys (``table_number``) plus a few system fields (``CreatedOn``).
Every entity has one ``FieldMap``; managers translate records only through it.
"""

import json
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from pydantic_core import to_jsonable_python

from frontdesk.dates import parse_timestamp, to_local_naive
from frontdesk.errors import NotFound

_MISSING = object()


def parse_items(value: Any) -> List[dict]:
    """Order items arrive serialized or structured; anything unreadable is an empty list"""
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value or "[]")
        except ValueError:
            return []
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def dump_items(items: Any) -> str:
    return json.dumps(to_jsonable_python(parse_items(items)))


def to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def to_bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def dump_timestamp(value: Any) -> Any:
    parsed = parse_timestamp(value)
    return to_local_naive(parsed) if parsed is not None else None


def coerce_id(value: Any, entity: str = "Record") -> int:
    """Ids cross the storage boundary as integers"""
    if isinstance(value, bool):
        raise NotFound(entity, value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise NotFound(entity, value)


class FieldSpec(NamedTuple):
    """One logical field: UI key, backend key, extra read-only aliases, converters"""
    ui: str
    backend: str
    aliases: Tuple[str, ...] = ()
    load: Optional[Callable[[Any], Any]] = None
    dump: Optional[Callable[[Any], Any]] = None


class FieldMap:
    """Bidirectional mapping between the UI and backend shapes of one entity"""

    def __init__(self, entity: str, collection: str, specs: Iterable[FieldSpec]):
        self.entity = entity
        self.collection = collection
        self.specs: Dict[str, FieldSpec] = {spec.ui: spec for spec in specs}
        self._by_backend: Dict[str, FieldSpec] = {spec.backend: spec for spec in self.specs.values()}

    @property
    def backend_fields(self) -> List[str]:
        return [spec.backend for spec in self.specs.values()]

    def _lookup(self, record: Mapping[str, Any], spec: FieldSpec) -> Any:
        for key in (spec.ui, spec.backend) + spec.aliases:
            value = record.get(key)
            if value is not None:
                return value
        return _MISSING

    def read(self, record: Mapping[str, Any], field: str, default: Any = None) -> Any:
        """Read a logical field: UI key first, then backend key and aliases, else default"""
        spec = self.specs.get(field) or self._by_backend.get(field)
        if spec is None:
            value = record.get(field)
            return default if value is None else value

        value = self._lookup(record, spec)
        if value is _MISSING:
            return default
        if spec.load is not None:
            value = spec.load(value)
            if value is None:
                return default
        return value

    def to_canonical(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Normalize a stored record (either shape) into the UI shape"""
        return {ui: self.read(record, ui) for ui in self.specs}

    def to_backend(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Translate a patch in either shape into backend keys only; unknown keys are dropped"""
        out = {}
        for spec in self.specs.values():
            if spec.ui in patch:
                value = patch[spec.ui]
            elif spec.backend in patch:
                value = patch[spec.backend]
            else:
                continue
            if spec.dump is not None and value is not None:
                value = spec.dump(value)
            out[spec.backend] = value
        return out


def _id_field() -> FieldSpec:
    return FieldSpec("id", "id", ("Id",), to_int)


def _created_field() -> FieldSpec:
    return FieldSpec("createdAt", "CreatedOn", ("created_at", "created_on"), parse_timestamp, dump_timestamp)


def _updated_field() -> FieldSpec:
    return FieldSpec("updatedAt", "ModifiedOn", ("updated_at", "modified_on"), parse_timestamp, dump_timestamp)


INVENTORY_FIELDS = FieldMap("Inventory item", "inventory", [
    _id_field(),
    FieldSpec("name", "name"),
    FieldSpec("quantity", "quantity", (), to_int, int),
    FieldSpec("unit", "unit"),
    FieldSpec("lowStockThreshold", "low_stock_threshold", (), to_int, int),
    FieldSpec("lastUpdated", "last_updated", (), parse_timestamp, dump_timestamp),
    _created_field(),
])

MENU_ITEM_FIELDS = FieldMap("Menu item", "menu_item", [
    _id_field(),
    FieldSpec("name", "name"),
    FieldSpec("description", "description"),
    FieldSpec("category", "category"),
    FieldSpec("price", "price", (), to_decimal, to_decimal),
    FieldSpec("available", "available", (), to_bool, to_bool),
    _created_field(),
    _updated_field(),
])

ORDER_FIELDS = FieldMap("Order", "order", [
    _id_field(),
    FieldSpec("orderNumber", "order_number"),
    FieldSpec("tableNumber", "table_number", (), to_int, int),
    FieldSpec("items", "items", (), parse_items, dump_items),
    FieldSpec("status", "status"),
    FieldSpec("totalAmount", "total_amount", (), to_decimal, to_decimal),
    _created_field(),
    FieldSpec("completedAt", "completed_at", (), parse_timestamp, dump_timestamp),
    _updated_field(),
])

RESERVATION_FIELDS = FieldMap("Reservation", "reservation", [
    _id_field(),
    FieldSpec("customerName", "customer_name"),
    FieldSpec("phone", "phone"),
    FieldSpec("dateTime", "date_time", (), parse_timestamp, dump_timestamp),
    FieldSpec("partySize", "party_size", (), to_int, int),
    FieldSpec("notes", "notes"),
    _created_field(),
    _updated_field(),
])
