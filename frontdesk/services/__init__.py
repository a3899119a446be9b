"""Entity managers and the facade that wires them together"""

from decimal import Decimal
from typing import Optional

from frontdesk.dates import Clock
from frontdesk.services.dashboard import DashboardAggregator
from frontdesk.services.inventory import InventoryTracker
from frontdesk.services.menu import MenuCatalog
from frontdesk.services.orders import OrderManager, compute_bill
from frontdesk.services.reservations import ReservationBook
from frontdesk.storage.base import BaseRecordStore


class Frontdesk:
    """All managers over one record store"""

    def __init__(
        self,
        store: BaseRecordStore,
        clock: Optional[Clock] = None,
        tax_rate: Optional[Decimal] = None,
    ):
        self.store = store
        self.inventory = InventoryTracker(store, clock)
        self.menu = MenuCatalog(store, clock)
        self.reservations = ReservationBook(store, clock)
        self.orders = OrderManager(store, clock, tax_rate=tax_rate)
        self.dashboard = DashboardAggregator(
            self.orders,
            self.reservations,
            self.inventory,
            clock=clock,
        )

    async def close(self) -> None:
        await self.store.close()


__all__ = [
    "Frontdesk",
    "DashboardAggregator",
    "InventoryTracker",
    "MenuCatalog",
    "OrderManager",
    "ReservationBook",
    "compute_bill",
]
