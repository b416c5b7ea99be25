from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.item import Item


class ItemRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, item: Item) -> Item:
        self.session.add(item)
        await self.session.flush()
        return item

    async def find_one(self, item_id: int) -> Optional[Item]:
        return await self.session.get(Item, item_id)

    async def find_all(self) -> List[Item]:
        result = await self.session.execute(select(Item).order_by(Item.id))
        return list(result.scalars().all())
