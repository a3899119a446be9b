"""Order management API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from frontdesk.api.deps import get_frontdesk
from frontdesk.schemas.order import Bill, Order, OrderCreate, OrderFilterCounts, OrderStatus, OrderUpdate
from frontdesk.services import Frontdesk

router = APIRouter()


@router.get("", response_model=List[Order])
async def list_orders(
    status: Optional[OrderStatus] = None,
    tab: Optional[str] = Query(None, pattern="^(today|pending|preparing|completed|cancelled)$"),
    q: Optional[str] = None,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """List orders, newest first"""
    if status and not tab:
        tab = status.value
    return await frontdesk.orders.search(q, tab)


@router.post("", response_model=Order, status_code=201)
async def create_order(
    order_data: OrderCreate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Create a new order from selected menu items"""
    return await frontdesk.orders.create(order_data)


@router.get("/today", response_model=List[Order])
async def todays_orders(frontdesk: Frontdesk = Depends(get_frontdesk)):
    return await frontdesk.orders.todays_orders()


@router.get("/counts", response_model=OrderFilterCounts)
async def order_counts(frontdesk: Frontdesk = Depends(get_frontdesk)):
    """Order count per tab"""
    return await frontdesk.orders.filter_counts()


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Get order details"""
    order = await frontdesk.orders.get(order_id)

    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    return order


@router.put("/{order_id}", response_model=Order)
async def update_order(
    order_id: int,
    order_data: OrderUpdate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Update order status or details"""
    return await frontdesk.orders.update(order_id, order_data)


@router.post("/{order_id}/bill", response_model=Bill)
async def generate_bill(
    order_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Generate a bill for an order"""
    return await frontdesk.orders.generate_bill(order_id)


@router.delete("/{order_id}", status_code=204)
async def delete_order(
    order_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    await frontdesk.orders.delete(order_id)
