"""Pydantic schemas for request/response validation"""

from frontdesk.schemas.menu import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItem,
)
from frontdesk.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItem,
    InventoryFilterCounts,
    QuantityAdjustment,
)
from frontdesk.schemas.order import (
    OrderStatus,
    OrderItem,
    OrderCreate,
    OrderUpdate,
    Order,
    Bill,
    OrderFilterCounts,
)
from frontdesk.schemas.reservation import (
    ReservationCreate,
    ReservationUpdate,
    Reservation,
)
from frontdesk.schemas.dashboard import DashboardSummary

__all__ = [
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItem",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItem",
    "InventoryFilterCounts",
    "QuantityAdjustment",
    "OrderStatus",
    "OrderItem",
    "OrderCreate",
    "OrderUpdate",
    "Order",
    "Bill",
    "OrderFilterCounts",
    "ReservationCreate",
    "ReservationUpdate",
    "Reservation",
    "DashboardSummary",
]
