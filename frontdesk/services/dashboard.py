"""Dashboard aggregation over orders, reservations and inventory"""

import asyncio
from decimal import Decimal
from typing import Optional

import structlog

from frontdesk.config import settings
from frontdesk.dates import Clock, is_today, local_now
from frontdesk.errors import FrontdeskError, TransportFailure
from frontdesk.schemas.dashboard import DashboardSummary
from frontdesk.schemas.order import ACTIVE_STATUSES, OrderStatus
from frontdesk.services.inventory import InventoryTracker
from frontdesk.services.orders import OrderManager, sort_newest_first
from frontdesk.services.reservations import ReservationBook

logger = structlog.get_logger()


class DashboardAggregator:
    """
    Joins three concurrent reads into one summary.

    Any failed read fails the whole summary. Each ``refresh`` takes a
    generation number and only the newest generation replaces ``latest``.
    """

    def __init__(
        self,
        orders: OrderManager,
        reservations: ReservationBook,
        inventory: InventoryTracker,
        clock: Optional[Clock] = None,
        recent_limit: Optional[int] = None,
    ):
        self.orders = orders
        self.reservations = reservations
        self.inventory = inventory
        self.clock = clock or local_now
        self.recent_limit = settings.dashboard_recent_limit if recent_limit is None else recent_limit
        self.latest: Optional[DashboardSummary] = None
        self._generation = 0

    async def summarize(self) -> DashboardSummary:
        try:
            orders, reservations, low_stock = await asyncio.gather(
                self.orders.list(strict=True),
                self.reservations.todays(strict=True),
                self.inventory.low_stock_items(strict=True),
            )
        except FrontdeskError as e:
            logger.error("Failed to load dashboard data", error=e.message)
            raise TransportFailure("Failed to load dashboard data") from e

        now = self.clock()
        todays_revenue = sum(
            (
                order.total_amount
                for order in orders
                if order.status == OrderStatus.COMPLETED.value and is_today(order.created_at, now)
            ),
            Decimal("0"),
        )

        return DashboardSummary(
            todays_revenue=todays_revenue,
            active_orders=sum(1 for order in orders if order.status in ACTIVE_STATUSES),
            upcoming_reservations=len(reservations),
            low_stock_items=len(low_stock),
            recent_orders=sort_newest_first(orders)[: self.recent_limit],
            upcoming_reservations_list=reservations[: self.recent_limit],
            generated_at=now,
        )

    async def refresh(self) -> DashboardSummary:
        """Summarize and keep the result unless a newer refresh started meanwhile"""
        self._generation += 1
        generation = self._generation

        summary = await self.summarize()

        if generation == self._generation:
            self.latest = summary
        else:
            logger.info(
                "Discarding stale dashboard snapshot",
                generation=generation,
                current=self._generation,
            )
        return summary
