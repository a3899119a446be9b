"""Menu management API endpoints"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from frontdesk.api.deps import get_frontdesk
from frontdesk.schemas.menu import MenuItem, MenuItemCreate, MenuItemUpdate
from frontdesk.services import Frontdesk

router = APIRouter()


@router.get("", response_model=List[MenuItem])
async def list_menu_items(
    category: Optional[str] = None,
    q: Optional[str] = None,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """List menu items, sorted by category and name"""
    return await frontdesk.menu.search(q, category)


@router.post("", response_model=MenuItem, status_code=201)
async def create_menu_item(
    item_data: MenuItemCreate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Create a new menu item"""
    return await frontdesk.menu.create(item_data)


@router.get("/categories", response_model=Dict[str, int])
async def menu_categories(frontdesk: Frontdesk = Depends(get_frontdesk)):
    """Item count per category"""
    return await frontdesk.menu.category_counts()


@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(
    item_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Get a specific menu item"""
    item = await frontdesk.menu.get(item_id)

    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")

    return item


@router.put("/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: int,
    item_data: MenuItemUpdate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Update a menu item"""
    return await frontdesk.menu.update(item_id, item_data)


@router.post("/{item_id}/toggle_availability", response_model=MenuItem)
async def toggle_menu_item(
    item_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Flip an item between available and unavailable"""
    return await frontdesk.menu.toggle_availability(item_id)


@router.delete("/{item_id}", status_code=204)
async def delete_menu_item(
    item_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Delete a menu item"""
    await frontdesk.menu.delete(item_id)
