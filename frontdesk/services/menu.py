"""Menu catalog"""

from collections import Counter
from typing import Any, Dict, List, Optional

from frontdesk.normalizer import MENU_ITEM_FIELDS
from frontdesk.schemas.menu import MenuItem, MenuItemCreate, MenuItemUpdate
from frontdesk.services.base import RecordManager


class MenuCatalog(RecordManager[MenuItem]):
    """
    Sellable menu items.

    Orders keep a name/price snapshot of each item, so edits here never
    reach orders that were already placed.
    """

    fields = MENU_ITEM_FIELDS
    model = MenuItem

    async def create(self, data: Any) -> MenuItem:
        payload = self._validate(MenuItemCreate, data)
        return await self._create(self._dump(payload))

    async def update(self, item_id: Any, patch: Any) -> MenuItem:
        payload = self._validate(MenuItemUpdate, patch)
        return await self._update(item_id, self._dump(payload, exclude_unset=True))

    async def toggle_availability(self, item_id: Any) -> MenuItem:
        item = await self._require(item_id)
        return await self._update(item.id, {"available": not item.available})

    async def by_category(self, category: str) -> List[MenuItem]:
        items = await self.list()
        return [item for item in items if item.category == category]

    async def search(self, term: Optional[str] = None, category: Optional[str] = None) -> List[MenuItem]:
        """Filter by category and free text, sorted by category then name"""
        items = await self.list()
        if category and category != "all":
            items = [item for item in items if item.category == category]
        items = [
            item for item in items
            if self._matches(term, item.name, item.description, item.category)
        ]
        return sorted(items, key=lambda item: ((item.category or "").lower(), item.name.lower()))

    async def category_counts(self) -> Dict[str, int]:
        items = await self.list()
        counts = Counter(item.category or "Uncategorized" for item in items)
        return {"all": len(items), **dict(sorted(counts.items()))}
