"""Order schemas"""

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from pydantic import Field, ValidationError, field_validator

from frontdesk.normalizer import parse_items
from frontdesk.schemas.common import CamelModel, RequiredStr


class OrderStatus(str, enum.Enum):
    """Order statuses; any status may be set from any other"""
    PENDING = "pending"
    PREPARING = "preparing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ACTIVE_STATUSES = (OrderStatus.PENDING.value, OrderStatus.PREPARING.value)


class OrderItem(CamelModel):
    """Snapshot of a menu item inside an order"""
    id: Optional[int] = None
    name: RequiredStr
    price: Decimal = Field(ge=0)
    quantity: int = Field(default=1, ge=1)


class OrderCreate(CamelModel):
    """Create order request"""
    table_number: int = Field(ge=1)
    items: List[OrderItem] = Field(min_length=1)


class OrderUpdate(CamelModel):
    """Update order request; item edits do not recompute the total"""
    status: Optional[OrderStatus] = None
    table_number: Optional[int] = Field(default=None, ge=1)
    items: Optional[List[OrderItem]] = None


class Order(CamelModel):
    """Order response"""
    id: int
    order_number: str = ""
    table_number: Optional[int] = None
    items: List[OrderItem] = []
    status: str = OrderStatus.PENDING.value
    total_amount: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("items", mode="before")
    @classmethod
    def _parse_items(cls, value):
        """Stored items are read leniently; entries that are not valid items are dropped"""
        items = []
        for entry in parse_items(value):
            try:
                items.append(OrderItem.model_validate(entry))
            except ValidationError:
                continue
        return items


class Bill(CamelModel):
    """Derived bill; never persisted"""
    order_id: int
    order_number: str
    table_number: Optional[int]
    items: List[OrderItem]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    generated_at: datetime


class OrderFilterCounts(CamelModel):
    today: int
    pending: int
    preparing: int
    completed: int
