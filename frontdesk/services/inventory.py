"""Inventory tracker"""

from typing import Any, List, Optional

import structlog

from frontdesk.normalizer import INVENTORY_FIELDS
from frontdesk.schemas.inventory import (
    InventoryFilterCounts,
    InventoryItem,
    InventoryItemCreate,
    InventoryItemUpdate,
)
from frontdesk.services.base import RecordManager

logger = structlog.get_logger()

STOCK_FILTERS = ("all", "low-stock", "in-stock")


class InventoryTracker(RecordManager[InventoryItem]):
    """CRUD and low-stock derivation over stock items"""

    fields = INVENTORY_FIELDS
    model = InventoryItem

    async def create(self, data: Any) -> InventoryItem:
        payload = self._validate(InventoryItemCreate, data)
        values = self._dump(payload)
        values["lastUpdated"] = self.now()
        return await self._create(values)

    async def update(self, item_id: Any, patch: Any) -> InventoryItem:
        """Merge a patch onto an existing item; every mutation refreshes lastUpdated"""
        payload = self._validate(InventoryItemUpdate, patch)
        values = self._dump(payload, exclude_unset=True)
        values["lastUpdated"] = self.now()
        return await self._update(item_id, values)

    async def adjust_quantity(self, item_id: Any, delta: int) -> InventoryItem:
        """
        Change the quantity by ``delta``.

        A result below zero is not persisted; the current item is returned unchanged.
        """
        item = await self._require(item_id)
        new_quantity = item.quantity + delta
        if new_quantity < 0:
            logger.info(
                "Quantity adjustment ignored",
                item_id=item.id,
                quantity=item.quantity,
                delta=delta,
            )
            return item
        return await self.update(item.id, {"quantity": new_quantity})

    async def low_stock_items(self, strict: bool = False) -> List[InventoryItem]:
        items = await self.list(strict=strict)
        return [item for item in items if item.is_low_stock]

    async def in_stock_items(self) -> List[InventoryItem]:
        items = await self.list()
        return [item for item in items if not item.is_low_stock]

    @staticmethod
    def stock_status(item: InventoryItem) -> str:
        return item.stock_status

    async def search(self, term: Optional[str] = None, stock_filter: str = "all") -> List[InventoryItem]:
        """Filter by stock level and name/unit, sorted by name"""
        if stock_filter not in STOCK_FILTERS:
            raise ValueError(f"Unknown stock filter: {stock_filter}")

        items = await self.list()
        if stock_filter == "low-stock":
            items = [item for item in items if item.is_low_stock]
        elif stock_filter == "in-stock":
            items = [item for item in items if not item.is_low_stock]

        items = [item for item in items if self._matches(term, item.name, item.unit)]
        return sorted(items, key=lambda item: item.name.lower())

    async def filter_counts(self) -> InventoryFilterCounts:
        items = await self.list()
        low = sum(1 for item in items if item.is_low_stock)
        return InventoryFilterCounts(all=len(items), low_stock=low, in_stock=len(items) - low)

