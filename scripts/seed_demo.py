#!/usr/bin/env python3
"""
Seed script to create demo menu, inventory, order and reservation data
"""

import asyncio
from datetime import datetime, timedelta


async def seed_demo_data():
    """Seed demo data for development"""
    from frontdesk.database import SessionLocal, init_db
    from frontdesk.services import Frontdesk
    from frontdesk.storage import SQLAlchemyRecordStore

    # Create tables
    await init_db()

    frontdesk = Frontdesk(SQLAlchemyRecordStore(SessionLocal))

    existing = await frontdesk.menu.list()
    if existing:
        print("Demo data already exists. Skipping...")
        return

    print("Creating menu items...")

    menu_items = [
        # Appetizers
        {"name": "Bruschetta", "description": "Grilled bread topped with fresh tomatoes, garlic, basil, and olive oil", "price": "8.99", "category": "Appetizers"},
        {"name": "Calamari Fritti", "description": "Crispy fried calamari with marinara sauce", "price": "12.99", "category": "Appetizers"},
        {"name": "Garlic Bread", "description": "Toasted bread with garlic butter and herbs", "price": "5.99", "category": "Appetizers"},

        # Pizzas
        {"name": "Margherita", "description": "Fresh mozzarella, tomato sauce, and basil", "price": "9.50", "category": "Pizza"},
        {"name": "Pepperoni Pizza", "description": "Classic pepperoni with mozzarella cheese", "price": "16.99", "category": "Pizza"},
        {"name": "Vegetable Pizza", "description": "Bell peppers, onions, mushrooms, olives, and tomatoes", "price": "16.99", "category": "Pizza"},

        # Pasta
        {"name": "Spaghetti Bolognese", "description": "Spaghetti with rich meat sauce", "price": "15.99", "category": "Pasta"},
        {"name": "Fettuccine Alfredo", "description": "Fettuccine in creamy parmesan sauce", "price": "14.99", "category": "Pasta"},
        {"name": "Lasagna", "description": "Layers of pasta, meat sauce, ricotta, and mozzarella", "price": "16.99", "category": "Pasta"},

        # Desserts
        {"name": "Tiramisu", "description": "Classic Italian coffee-flavored dessert", "price": "8.99", "category": "Desserts"},
        {"name": "Cannoli", "description": "Crispy shells filled with sweet ricotta cream", "price": "6.99", "category": "Desserts"},

        # Drinks
        {"name": "Soft Drink", "description": "Coca-Cola, Diet Coke, Sprite, or Fanta", "price": "2.99", "category": "Drinks"},
        {"name": "Espresso", "description": "Single or double shot", "price": "3.49", "category": "Drinks"},
    ]

    created = [await frontdesk.menu.create(item_data) for item_data in menu_items]

    print("Creating inventory...")

    inventory = [
        {"name": "Mozzarella", "quantity": 12, "unit": "kg", "lowStockThreshold": 5},
        {"name": "Tomato Sauce", "quantity": 4, "unit": "liters", "lowStockThreshold": 6},
        {"name": "Flour", "quantity": 25, "unit": "kg", "lowStockThreshold": 10},
        {"name": "Basil", "quantity": 2, "unit": "bunches", "lowStockThreshold": 3},
        {"name": "Espresso Beans", "quantity": 7, "unit": "kg", "lowStockThreshold": 5},
    ]
    for item_data in inventory:
        await frontdesk.inventory.create(item_data)

    print("Creating orders...")

    by_name = {item.name: item for item in created}

    def line(name, quantity):
        item = by_name[name]
        return {"id": item.id, "name": item.name, "price": str(item.price), "quantity": quantity}

    first = await frontdesk.orders.create({"tableNumber": 4, "items": [line("Margherita", 2)]})
    await frontdesk.orders.update(first.id, {"status": "completed"})
    second = await frontdesk.orders.create(
        {"tableNumber": 7, "items": [line("Lasagna", 1), line("Soft Drink", 2)]}
    )
    await frontdesk.orders.update(second.id, {"status": "preparing"})
    await frontdesk.orders.create({"tableNumber": 2, "items": [line("Tiramisu", 2), line("Espresso", 2)]})

    print("Creating reservations...")

    tonight = datetime.now().replace(hour=20, minute=0, second=0, microsecond=0)
    if tonight <= datetime.now():
        tonight += timedelta(days=1)

    reservations = [
        {"customerName": "Giulia Bianchi", "phone": "+1 (555) 010-2233", "dateTime": tonight, "partySize": 4, "notes": "Window table"},
        {"customerName": "Tom Becker", "phone": "555-010-7788", "dateTime": tonight + timedelta(days=1), "partySize": 2},
        {"customerName": "Ana Souza", "phone": "+15550104455", "dateTime": tonight + timedelta(days=3), "partySize": 8, "notes": "Birthday dinner"},
    ]
    for reservation_data in reservations:
        await frontdesk.reservations.create(reservation_data)

    await frontdesk.close()

    print(f"""
Demo data created successfully!

Menu: {len(menu_items)} items
Inventory: {len(inventory)} items
Orders: 3
Reservations: {len(reservations)}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
