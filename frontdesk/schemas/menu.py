"""Menu schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from frontdesk.schemas.common import CamelModel, RequiredStr


class MenuItemCreate(CamelModel):
    """Create menu item request"""
    name: RequiredStr
    description: RequiredStr
    category: Optional[str] = None
    price: Decimal = Field(ge=0)
    available: bool = True


class MenuItemUpdate(CamelModel):
    """Update menu item request"""
    name: Optional[RequiredStr] = None
    description: Optional[RequiredStr] = None
    category: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    available: Optional[bool] = None


class MenuItem(CamelModel):
    """Menu item response"""
    id: int
    name: str = ""
    description: str = ""
    category: Optional[str] = None
    price: Decimal = Decimal("0")
    available: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
