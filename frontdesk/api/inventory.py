"""Inventory API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from frontdesk.api.deps import get_frontdesk
from frontdesk.schemas.inventory import (
    InventoryFilterCounts,
    InventoryItem,
    InventoryItemCreate,
    InventoryItemUpdate,
    QuantityAdjustment,
)
from frontdesk.services import Frontdesk

router = APIRouter()


@router.get("", response_model=List[InventoryItem])
async def list_inventory(
    stock_filter: str = Query("all", alias="filter", pattern="^(all|low-stock|in-stock)$"),
    q: Optional[str] = None,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """List stock items sorted by name"""
    return await frontdesk.inventory.search(q, stock_filter)


@router.post("", response_model=InventoryItem, status_code=201)
async def create_inventory_item(
    item_data: InventoryItemCreate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Add a stock item"""
    return await frontdesk.inventory.create(item_data)


@router.get("/low_stock", response_model=List[InventoryItem])
async def low_stock_items(frontdesk: Frontdesk = Depends(get_frontdesk)):
    """Items at or below their low-stock threshold"""
    return await frontdesk.inventory.low_stock_items()


@router.get("/counts", response_model=InventoryFilterCounts)
async def inventory_counts(frontdesk: Frontdesk = Depends(get_frontdesk)):
    return await frontdesk.inventory.filter_counts()


@router.get("/{item_id}", response_model=InventoryItem)
async def get_inventory_item(
    item_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    item = await frontdesk.inventory.get(item_id)

    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")

    return item


@router.put("/{item_id}", response_model=InventoryItem)
async def update_inventory_item(
    item_id: int,
    item_data: InventoryItemUpdate,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Edit a stock item"""
    return await frontdesk.inventory.update(item_id, item_data)


@router.post("/{item_id}/adjust", response_model=InventoryItem)
async def adjust_inventory_item(
    item_id: int,
    adjustment: QuantityAdjustment,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    """Increment or decrement the quantity; never goes below zero"""
    return await frontdesk.inventory.adjust_quantity(item_id, adjustment.delta)


@router.delete("/{item_id}", status_code=204)
async def delete_inventory_item(
    item_id: int,
    frontdesk: Frontdesk = Depends(get_frontdesk),
):
    await frontdesk.inventory.delete(item_id)
