"""Inventory schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, computed_field

from frontdesk.schemas.common import CamelModel, RequiredStr

# Between the threshold and this multiple of it an item counts as "medium" stock
MEDIUM_STOCK_FACTOR = Decimal("1.5")


class InventoryItemCreate(CamelModel):
    """Create inventory item request"""
    name: RequiredStr
    quantity: int = Field(default=0, ge=0)
    unit: RequiredStr
    low_stock_threshold: int = Field(default=0, ge=0)


class InventoryItemUpdate(CamelModel):
    """Update inventory item request"""
    name: Optional[RequiredStr] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    unit: Optional[RequiredStr] = None
    low_stock_threshold: Optional[int] = Field(default=None, ge=0)


class QuantityAdjustment(CamelModel):
    delta: int


class InventoryItem(CamelModel):
    """Inventory item response"""
    id: int
    name: str = ""
    quantity: int = 0
    unit: str = ""
    low_stock_threshold: int = 0
    last_updated: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.low_stock_threshold

    @computed_field
    @property
    def stock_status(self) -> str:
        """low, medium or good"""
        if self.is_low_stock:
            return "low"
        if self.quantity <= self.low_stock_threshold * MEDIUM_STOCK_FACTOR:
            return "medium"
        return "good"


class InventoryFilterCounts(CamelModel):
    all: int
    low_stock: int = Field(alias="low-stock")
    in_stock: int = Field(alias="in-stock")
