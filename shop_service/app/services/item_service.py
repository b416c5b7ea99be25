"""Item service for catalog management"""

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.item import Album, Book, Item, Movie
from ..repository.item_repository import ItemRepository
from ..schemas.item import ItemCreateRequest
from ..utils.logging import setup_shop_logging as setup_logging

logger = setup_logging("shop_service.items")


class ItemService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.item_repository = ItemRepository(session)

    @staticmethod
    def build_item(item_data: ItemCreateRequest) -> Item:
        """Create the item subtype matching ``item_type``"""
        common = {
            "name": item_data.name,
            "price": item_data.price,
            "stock_quantity": item_data.stock_quantity,
        }
        if item_data.item_type == "album":
            return Album(artist=item_data.artist, etc=item_data.etc, **common)
        if item_data.item_type == "movie":
            return Movie(director=item_data.director, actor=item_data.actor, **common)
        return Book(author=item_data.author, isbn=item_data.isbn, **common)

    async def save_item(self, item: Item) -> Item:
        await self.item_repository.save(item)
        await self.session.commit()

        logger.info(
            "Item saved",
            extra={"item_id": item.id, "dtype": item.dtype, "event_type": "item_saved"},
        )
        return item

    async def update_item(
        self, item_id: int, name: str, price: int, stock_quantity: int
    ) -> Item:
        item = await self.find_one(item_id)
        item.name = name
        item.price = price
        item.stock_quantity = stock_quantity
        await self.session.commit()
        return item

    async def find_items(self) -> List[Item]:
        return await self.item_repository.find_all()

    async def find_one(self, item_id: int) -> Item:
        item = await self.item_repository.find_one(item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
            )
        return item
