"""Tests for the menu catalog"""

from decimal import Decimal

import pytest

from frontdesk.errors import NotFound, ValidationFailure


@pytest.mark.asyncio
async def test_create_menu_item(frontdesk):
    item = await frontdesk.menu.create(
        {"name": "Margherita", "description": "Classic", "price": 9.50, "category": "Pizza", "available": True}
    )

    assert item.id is not None
    assert item.price == Decimal("9.50")
    assert item.available is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data, field",
    [
        ({"name": "", "description": "x", "price": "1.00"}, "name"),
        ({"name": "Soup", "description": "", "price": "1.00"}, "description"),
        ({"name": "Soup", "description": "Hot", "price": "-0.01"}, "price"),
        ({"name": "Soup", "description": "Hot", "price": "free"}, "price"),
    ],
)
async def test_create_validation(frontdesk, data, field):
    with pytest.raises(ValidationFailure) as exc_info:
        await frontdesk.menu.create(data)

    assert field in {error.field for error in exc_info.value.errors}


@pytest.mark.asyncio
async def test_toggle_availability(frontdesk, test_menu_items):
    item = test_menu_items[0]

    toggled = await frontdesk.menu.toggle_availability(item.id)
    assert toggled.available is False

    toggled = await frontdesk.menu.toggle_availability(str(item.id))
    assert toggled.available is True


@pytest.mark.asyncio
async def test_toggle_missing_item(frontdesk):
    with pytest.raises(NotFound):
        await frontdesk.menu.toggle_availability(404)


@pytest.mark.asyncio
async def test_by_category(frontdesk, test_menu_items):
    pizzas = await frontdesk.menu.by_category("Pizza")
    assert {item.name for item in pizzas} == {"Margherita", "Pepperoni Pizza"}
    assert await frontdesk.menu.by_category("Sushi") == []


@pytest.mark.asyncio
async def test_search_sorted_by_category_then_name(frontdesk, test_menu_items):
    results = await frontdesk.menu.search()
    assert [item.name for item in results] == ["Margherita", "Pepperoni Pizza", "Caesar Salad"]

    results = await frontdesk.menu.search("mozzarella")
    assert [item.name for item in results] == ["Margherita", "Pepperoni Pizza"]

    results = await frontdesk.menu.search("salad", category="Pizza")
    assert results == []


@pytest.mark.asyncio
async def test_category_counts(frontdesk, test_menu_items):
    counts = await frontdesk.menu.category_counts()
    assert counts == {"all": 3, "Pizza": 2, "Salads": 1}


@pytest.mark.asyncio
async def test_update_and_delete(frontdesk, test_menu_items):
    item = test_menu_items[2]

    updated = await frontdesk.menu.update(item.id, {"price": "8.00"})
    assert updated.price == Decimal("8.00")
    assert updated.name == "Caesar Salad"

    await frontdesk.menu.delete(item.id)
    assert await frontdesk.menu.get(item.id) is None
