"""Tests for the order lifecycle and billing"""

import re
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

import pytest

from frontdesk.errors import NotFound, ValidationFailure
from frontdesk.schemas.order import Order
from frontdesk.services import compute_bill


def order_line(item, quantity):
    return {"id": item.id, "name": item.name, "price": str(item.price), "quantity": quantity}


@pytest.mark.asyncio
async def test_create_computes_total_and_number(frontdesk, test_menu_items, clock):
    margherita, pepperoni, salad = test_menu_items

    order = await frontdesk.orders.create({
        "tableNumber": 4,
        "items": [order_line(margherita, 2), order_line(salad, 1)],
    })

    assert order.total_amount == Decimal("26.25")
    assert order.status == "pending"
    assert order.table_number == 4
    assert re.fullmatch(r"ORD-\d{6}", order.order_number)
    assert order.created_at == clock()
    assert order.completed_at is None
    assert [item.name for item in order.items] == ["Margherita", "Caesar Salad"]


@pytest.mark.asyncio
async def test_order_numbers_are_unique(frontdesk, test_menu_items):
    data = {"tableNumber": 1, "items": [order_line(test_menu_items[0], 1)]}

    numbers = {(await frontdesk.orders.create(data)).order_number for _ in range(5)}

    assert len(numbers) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data",
    [
        {"items": [{"name": "Cola", "price": "2.00", "quantity": 1}]},
        {"tableNumber": 3, "items": []},
        {"tableNumber": 3},
    ],
)
async def test_create_requires_table_and_items(frontdesk, data):
    with pytest.raises(ValidationFailure):
        await frontdesk.orders.create(data)


@pytest.mark.asyncio
async def test_total_is_not_recomputed_on_update(frontdesk, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 2, "items": [order_line(test_menu_items[0], 2)]})

    updated = await frontdesk.orders.update(order.id, {
        "status": "preparing",
        "items": [order_line(test_menu_items[0], 5)],
    })

    assert updated.status == "preparing"
    assert updated.items[0].quantity == 5
    assert updated.total_amount == Decimal("19.00")


@pytest.mark.asyncio
async def test_completed_at_is_stamped_once(frontdesk, test_menu_items, clock):
    order = await frontdesk.orders.create({"tableNumber": 2, "items": [order_line(test_menu_items[0], 1)]})

    clock.advance(minutes=20)
    completed = await frontdesk.orders.update(order.id, {"status": "completed"})
    first_stamp = completed.completed_at
    assert first_stamp == clock()

    # completed -> completed
    clock.advance(minutes=5)
    again = await frontdesk.orders.update(order.id, {"status": "completed"})
    assert again.completed_at == first_stamp

    # completed -> cancelled -> completed
    clock.advance(minutes=5)
    await frontdesk.orders.update(order.id, {"status": "cancelled"})
    clock.advance(minutes=5)
    reopened = await frontdesk.orders.update(order.id, {"status": "completed"})
    assert reopened.completed_at == first_stamp


@pytest.mark.asyncio
async def test_any_status_transition_is_allowed(frontdesk, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 2, "items": [order_line(test_menu_items[0], 1)]})

    for status in ("cancelled", "pending", "completed", "preparing"):
        order = await frontdesk.orders.update(order.id, {"status": status})
        assert order.status == status


@pytest.mark.asyncio
async def test_unknown_status_is_rejected(frontdesk, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 2, "items": [order_line(test_menu_items[0], 1)]})

    with pytest.raises(ValidationFailure):
        await frontdesk.orders.update(order.id, {"status": "eaten"})


@pytest.mark.asyncio
async def test_update_and_delete_missing_order(frontdesk):
    with pytest.raises(NotFound):
        await frontdesk.orders.update(12345, {"status": "preparing"})
    with pytest.raises(NotFound):
        await frontdesk.orders.update(12345, {"status": "completed"})
    with pytest.raises(NotFound):
        await frontdesk.orders.delete(12345)


@pytest.mark.asyncio
async def test_generate_bill(frontdesk, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 4, "items": [order_line(test_menu_items[0], 2)]})

    bill = await frontdesk.orders.generate_bill(order.id)

    assert bill.order_id == order.id
    assert bill.order_number == order.order_number
    assert bill.table_number == 4
    assert bill.subtotal == Decimal("19.00")
    assert bill.tax == Decimal("1.90")
    assert bill.total == Decimal("20.90")

    # Bills are not stored on the order
    second = await frontdesk.orders.generate_bill(order.id)
    assert second == bill
    stored = await frontdesk.orders.get(order.id)
    assert stored.total_amount == Decimal("19.00")


@pytest.mark.asyncio
async def test_generate_bill_missing_order(frontdesk):
    with pytest.raises(NotFound):
        await frontdesk.orders.generate_bill(999)


@pytest.mark.parametrize(
    "subtotal, tax, total",
    [
        ("0", "0.00", "0.00"),
        ("19.00", "1.90", "20.90"),
        ("12.35", "1.24", "13.59"),
        ("0.05", "0.01", "0.06"),
        ("0.04", "0.00", "0.04"),
        ("99.99", "10.00", "109.99"),
    ],
)
def test_bill_rounding(subtotal, tax, total):
    order = Order(id=1, order_number="ORD-000001", table_number=1, total_amount=Decimal(subtotal))

    bill = compute_bill(order, Decimal("0.10"), generated_at=datetime(2026, 1, 1))

    assert bill.tax == Decimal(tax)
    assert bill.total == Decimal(total)
    assert bill.tax == (bill.subtotal * Decimal("0.10")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@pytest.mark.asyncio
async def test_malformed_items_read_as_empty(frontdesk, store, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 4, "items": [order_line(test_menu_items[0], 1)]})
    await store.update_records("order", [{"id": order.id, "items": "{not json"}])

    stored = await frontdesk.orders.get(order.id)

    assert stored.items == []
    assert stored.total_amount == Decimal("9.50")


@pytest.mark.asyncio
async def test_item_entries_with_wrong_shape_are_dropped(frontdesk, store, test_menu_items, client):
    order = await frontdesk.orders.create({"tableNumber": 4, "items": [order_line(test_menu_items[0], 1)]})
    await store.update_records("order", [{
        "id": order.id,
        "items": '[{"name": "x"}, {"name": "Cola", "price": "2.00", "quantity": 1}, 7]',
    }])

    stored = await frontdesk.orders.get(order.id)
    assert [item.name for item in stored.items] == ["Cola"]
    assert [o.id for o in await frontdesk.orders.list()] == [order.id]
    assert (await frontdesk.orders.filter_counts()).pending == 1

    response = await client.get("/dashboard")
    assert response.status_code == 200
    assert len(response.json()["recentOrders"][0]["items"]) == 1


@pytest.mark.asyncio
async def test_completing_missing_order_is_logged(frontdesk, caplog):
    with pytest.raises(NotFound):
        await frontdesk.orders.update(12345, {"status": "completed"})

    assert "Failed to update order" in caplog.text


@pytest.mark.asyncio
async def test_by_status_and_todays_orders(frontdesk, test_menu_items, clock):
    line = [order_line(test_menu_items[0], 1)]

    clock.advance(days=-1)
    yesterday = await frontdesk.orders.create({"tableNumber": 1, "items": line})
    clock.advance(days=1)
    first = await frontdesk.orders.create({"tableNumber": 2, "items": line})
    second = await frontdesk.orders.create({"tableNumber": 3, "items": line})
    await frontdesk.orders.update(second.id, {"status": "preparing"})

    pending = await frontdesk.orders.by_status("pending")
    assert {o.id for o in pending} == {yesterday.id, first.id}

    today = await frontdesk.orders.todays_orders()
    assert {o.id for o in today} == {first.id, second.id}

    counts = await frontdesk.orders.filter_counts()
    assert (counts.today, counts.pending, counts.preparing, counts.completed) == (2, 2, 1, 0)


@pytest.mark.asyncio
async def test_search_orders(frontdesk, test_menu_items, clock):
    margherita, pepperoni, salad = test_menu_items

    older = await frontdesk.orders.create({"tableNumber": 12, "items": [order_line(salad, 1)]})
    clock.advance(minutes=10)
    newer = await frontdesk.orders.create({"tableNumber": 3, "items": [order_line(pepperoni, 1)]})

    everything = await frontdesk.orders.search()
    assert [o.id for o in everything] == [newer.id, older.id]

    by_item = await frontdesk.orders.search("caesar")
    assert [o.id for o in by_item] == [older.id]

    by_number = await frontdesk.orders.search(newer.order_number.lower())
    assert [o.id for o in by_number] == [newer.id]

    assert await frontdesk.orders.search(tab="completed") == []
    assert len(await frontdesk.orders.search(tab="today")) == 2


@pytest.mark.asyncio
async def test_string_ids_are_coerced(frontdesk, test_menu_items):
    order = await frontdesk.orders.create({"tableNumber": 4, "items": [order_line(test_menu_items[0], 1)]})

    assert (await frontdesk.orders.get(str(order.id))).id == order.id
    assert await frontdesk.orders.get("not-a-number") is None
    with pytest.raises(NotFound):
        await frontdesk.orders.generate_bill("not-a-number")


@pytest.mark.asyncio
async def test_order_snapshot_survives_menu_changes(frontdesk, test_menu_items):
    margherita = test_menu_items[0]
    order = await frontdesk.orders.create({"tableNumber": 4, "items": [order_line(margherita, 1)]})

    await frontdesk.menu.update(margherita.id, {"price": "12.00", "available": False})

    stored = await frontdesk.orders.get(order.id)
    assert stored.items[0].price == Decimal("9.50")
    assert stored.total_amount == Decimal("9.50")
