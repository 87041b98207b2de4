"""Item service for the legacy item collection."""

from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from songvote.models.item import Item

logger = structlog.get_logger(__name__)


class ItemService:
    """Handles CRUD operations for items."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = logger.bind(service="item_service")

    async def list_items(self) -> List[Item]:
        """Get all items, newest first."""
        stmt = select(Item).order_by(Item.created_at.desc(), Item.id.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_item(self, name: str, description: Optional[str] = None) -> Item:
        item = Item(name=name, description=description)
        self.db.add(item)
        await self.db.flush()
        await self.db.refresh(item)

        self.logger.info("item_created", item_id=item.id)
        return item

    async def get_item(self, item_id: int) -> Optional[Item]:
        result = await self.db.execute(select(Item).where(Item.id == item_id))
        return result.scalar_one_or_none()

    async def delete_item(self, item_id: int) -> bool:
        """Delete an item. Returns False if it does not exist."""
        item = await self.get_item(item_id)
        if not item:
            return False

        await self.db.delete(item)
        await self.db.flush()
        self.logger.info("item_deleted", item_id=item_id)
        return True
