"""Order lifecycle manager"""

import time
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, List, Optional

import structlog

from frontdesk.config import settings
from frontdesk.dates import Clock, is_today
from frontdesk.errors import FrontdeskError
from frontdesk.normalizer import ORDER_FIELDS
from frontdesk.schemas.order import (
    Bill,
    Order,
    OrderCreate,
    OrderFilterCounts,
    OrderStatus,
    OrderUpdate,
)
from frontdesk.services.base import RecordManager
from frontdesk.storage.base import BaseRecordStore

logger = structlog.get_logger()

CENTS = Decimal("0.01")

ORDER_TABS = ("today", "pending", "preparing", "completed", "cancelled")


def round_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_bill(order: Order, tax_rate: Decimal, generated_at: datetime) -> Bill:
    """Subtotal is the stored total; tax and total are rounded to cents"""
    subtotal = round_money(order.total_amount)
    tax = round_money(subtotal * tax_rate)
    total = round_money(subtotal + tax)
    return Bill(
        order_id=order.id,
        order_number=order.order_number,
        table_number=order.table_number,
        items=order.items,
        subtotal=subtotal,
        tax=tax,
        total=total,
        generated_at=generated_at,
    )


class OrderManager(RecordManager[Order]):
    """
    Orders, their status and their bills.

    Status changes are not guarded: any status can be set from any other.
    The only side effect is that the first move into ``completed`` stamps
    ``completedAt``.
    """

    fields = ORDER_FIELDS
    model = Order

    def __init__(
        self,
        store: BaseRecordStore,
        clock: Optional[Clock] = None,
        tax_rate: Optional[Decimal] = None,
    ):
        super().__init__(store, clock)
        self.tax_rate = Decimal(str(tax_rate)) if tax_rate is not None else settings.tax_rate
        self._last_stamp = 0

    def _next_stamp(self) -> int:
        """Millisecond creation stamp, strictly increasing within this manager"""
        stamp = int(time.time() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return stamp

    def _order_number(self) -> str:
        return f"ORD-{str(self._next_stamp())[-6:]}"

    async def create(self, data: Any) -> Order:
        payload = self._validate(OrderCreate, data)
        total = sum((item.price * item.quantity for item in payload.items), Decimal("0"))

        values = self._dump(payload)
        values.update({
            "orderNumber": self._order_number(),
            "status": OrderStatus.PENDING.value,
            "totalAmount": round_money(total),
            "createdAt": self.now(),
        })
        order = await self._create(values)
        logger.info(
            "Order placed",
            order_number=order.order_number,
            table_number=order.table_number,
            total=str(order.total_amount),
        )
        return order

    async def update(self, order_id: Any, patch: Any) -> Order:
        """Merge a patch; the total is never recomputed"""
        payload = self._validate(OrderUpdate, patch)
        values = self._dump(payload, exclude_unset=True)

        if values.get("status") == OrderStatus.COMPLETED.value:
            try:
                current = await self._require(order_id)
            except FrontdeskError as e:
                logger.error("Failed to update order", record_id=order_id, error=e.message)
                raise
            if current.completed_at is None:
                values["completedAt"] = self.now()

        return await self._update(order_id, values)

    async def by_status(self, status: str) -> List[Order]:
        status = getattr(status, "value", status)
        orders = await self.list()
        return [order for order in orders if order.status == status]

    async def todays_orders(self) -> List[Order]:
        orders = await self.list()
        now = self.now()
        return [order for order in orders if is_today(order.created_at, now)]

    async def generate_bill(self, order_id: Any) -> Bill:
        """Compute a fresh bill; nothing is stored"""
        order = await self._require(order_id)
        bill = compute_bill(order, self.tax_rate, self.now())
        logger.info("Bill generated", order_id=order.id, total=str(bill.total))
        return bill

    async def search(self, term: Optional[str] = None, tab: Optional[str] = None) -> List[Order]:
        """Tab filter (today or a status) plus number/table/item search, newest first"""
        if tab is not None and tab not in ORDER_TABS:
            raise ValueError(f"Unknown order tab: {tab}")

        orders = await self.list()
        now = self.now()
        if tab == "today":
            orders = [order for order in orders if is_today(order.created_at, now)]
        elif tab:
            orders = [order for order in orders if order.status == tab]

        orders = [
            order for order in orders
            if self._matches(
                term,
                order.order_number,
                order.table_number,
                *(item.name for item in order.items),
            )
        ]
        return sort_newest_first(orders)

    async def filter_counts(self) -> OrderFilterCounts:
        orders = await self.list()
        now = self.now()

        def count(status: str) -> int:
            return sum(1 for order in orders if order.status == status)

        return OrderFilterCounts(
            today=sum(1 for order in orders if is_today(order.created_at, now)),
            pending=count(OrderStatus.PENDING.value),
            preparing=count(OrderStatus.PREPARING.value),
            completed=count(OrderStatus.COMPLETED.value),
        )


def sort_newest_first(orders: List[Order]) -> List[Order]:
    return sorted(orders, key=lambda order: order.created_at or datetime.min, reverse=True)
