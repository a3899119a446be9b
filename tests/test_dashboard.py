"""Tests for the dashboard aggregator"""

import asyncio
from datetime import timedelta
from decimal import Decimal

import pytest

from frontdesk.errors import TransportFailure
from frontdesk.services import DashboardAggregator, Frontdesk

from tests.conftest import NOW, BrokenStore


async def place(frontdesk, item, quantity=1, table=1, status=None):
    order = await frontdesk.orders.create({
        "tableNumber": table,
        "items": [{"id": item.id, "name": item.name, "price": str(item.price), "quantity": quantity}],
    })
    if status:
        order = await frontdesk.orders.update(order.id, {"status": status})
    return order


@pytest.mark.asyncio
async def test_empty_dashboard(frontdesk):
    summary = await frontdesk.dashboard.summarize()

    assert summary.todays_revenue == Decimal("0")
    assert summary.active_orders == 0
    assert summary.upcoming_reservations == 0
    assert summary.low_stock_items == 0
    assert summary.recent_orders == []
    assert summary.upcoming_reservations_list == []


@pytest.mark.asyncio
async def test_summary_metrics(frontdesk, test_menu_items, clock):
    margherita, pepperoni, salad = test_menu_items

    clock.advance(days=-1)
    await place(frontdesk, pepperoni, status="completed")
    clock.advance(days=1)

    await place(frontdesk, margherita, quantity=2, status="completed")
    await place(frontdesk, salad, status="completed")
    await place(frontdesk, margherita, status="cancelled")
    await place(frontdesk, salad)
    await place(frontdesk, pepperoni, status="preparing")

    await frontdesk.reservations.create({
        "customerName": "Ana", "phone": "555-0100", "dateTime": (NOW + timedelta(hours=6)).isoformat(), "partySize": 2,
    })
    await frontdesk.reservations.create({
        "customerName": "Bea", "phone": "555-0101", "dateTime": (NOW + timedelta(days=1)).isoformat(), "partySize": 2,
    })

    await frontdesk.inventory.create({"name": "Flour", "quantity": 2, "unit": "kg", "lowStockThreshold": 5})
    await frontdesk.inventory.create({"name": "Salt", "quantity": 50, "unit": "kg", "lowStockThreshold": 5})

    summary = await frontdesk.dashboard.summarize()

    assert summary.todays_revenue == Decimal("26.25")
    assert summary.active_orders == 2
    assert summary.upcoming_reservations == 1
    assert [r.customer_name for r in summary.upcoming_reservations_list] == ["Ana"]
    assert summary.low_stock_items == 1
    assert summary.generated_at == clock()


@pytest.mark.asyncio
async def test_recent_orders_are_newest_five(frontdesk, test_menu_items, clock):
    placed = []
    for table in range(1, 8):
        placed.append(await place(frontdesk, test_menu_items[0], table=table))
        clock.advance(minutes=1)

    summary = await frontdesk.dashboard.summarize()

    assert [o.table_number for o in summary.recent_orders] == [7, 6, 5, 4, 3]


@pytest.mark.asyncio
async def test_zero_recent_limit_is_respected(frontdesk, test_menu_items, clock):
    await place(frontdesk, test_menu_items[0])
    dashboard = DashboardAggregator(
        frontdesk.orders, frontdesk.reservations, frontdesk.inventory, clock=clock, recent_limit=0
    )

    summary = await dashboard.summarize()

    assert summary.active_orders == 1
    assert summary.recent_orders == []
    assert summary.upcoming_reservations_list == []


@pytest.mark.asyncio
@pytest.mark.parametrize("collection", ["order", "reservation", "inventory"])
async def test_any_failed_read_fails_the_summary(store, clock, collection):
    broken = Frontdesk(BrokenStore(store, [collection]), clock=clock)

    with pytest.raises(TransportFailure) as exc_info:
        await broken.dashboard.summarize()

    assert exc_info.value.message == "Failed to load dashboard data"
    assert broken.dashboard.latest is None


@pytest.mark.asyncio
async def test_refresh_keeps_latest_snapshot(frontdesk, test_menu_items):
    await place(frontdesk, test_menu_items[0])

    summary = await frontdesk.dashboard.refresh()

    assert frontdesk.dashboard.latest is summary
    assert summary.active_orders == 1


@pytest.mark.asyncio
async def test_stale_refresh_is_discarded(frontdesk, monkeypatch):
    dashboard = frontdesk.dashboard
    gate = asyncio.Event()
    calls = 0

    async def summarize():
        nonlocal calls
        calls += 1
        snapshot = f"snapshot-{calls}"
        if calls == 1:
            await gate.wait()
        return snapshot

    monkeypatch.setattr(dashboard, "summarize", summarize)

    slow = asyncio.create_task(dashboard.refresh())
    await asyncio.sleep(0)

    fresh = await dashboard.refresh()
    gate.set()
    stale = await slow

    assert (stale, fresh) == ("snapshot-1", "snapshot-2")
    assert dashboard.latest == "snapshot-2"


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_snapshot(frontdesk, store, clock, monkeypatch):
    first = await frontdesk.dashboard.refresh()

    async def fail():
        raise TransportFailure("Failed to load dashboard data")

    monkeypatch.setattr(frontdesk.dashboard, "summarize", fail)

    with pytest.raises(TransportFailure):
        await frontdesk.dashboard.refresh()
    assert frontdesk.dashboard.latest is first
