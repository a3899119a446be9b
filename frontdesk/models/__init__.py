"""Database models"""

from frontdesk.models.inventory import InventoryItem
from frontdesk.models.menu import MenuItem
from frontdesk.models.order import Order
from frontdesk.models.reservation import Reservation

# Storage collection name -> model
COLLECTIONS = {
    "inventory": InventoryItem,
    "menu_item": MenuItem,
    "order": Order,
    "reservation": Reservation,
}

__all__ = [
    "InventoryItem",
    "MenuItem",
    "Order",
    "Reservation",
    "COLLECTIONS",
]
