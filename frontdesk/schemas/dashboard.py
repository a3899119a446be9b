"""Dashboard schemas"""

from datetime import datetime
from decimal import Decimal
from typing import List

from frontdesk.schemas.common import CamelModel
from frontdesk.schemas.order import Order
from frontdesk.schemas.reservation import Reservation


class DashboardSummary(CamelModel):
    """Metrics and recent activity for the front-of-house dashboard"""
    todays_revenue: Decimal
    active_orders: int
    upcoming_reservations: int
    low_stock_items: int
    recent_orders: List[Order]
    upcoming_reservations_list: List[Reservation]
    generated_at: datetime
