from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from ..models.member import Member
from ..models.order import Order, OrderItem
from ..schemas.order import OrderSearch


class OrderRepository:
    def __init__(self, session: AsyncSession, search_limit: int = 1000):
        self.session = session
        self.search_limit = search_limit

    async def save(self, order: Order) -> Order:
        self.session.add(order)
        await self.session.flush()  # Assigns the order ID
        return order

    async def find_one(self, order_id: int) -> Optional[Order]:
        return await self.session.get(Order, order_id)

    async def find_one_with_items(self, order_id: int) -> Optional[Order]:
        """Get an order with its delivery, lines and line items loaded"""
        query = (
            select(Order)
            .options(
                joinedload(Order.delivery),
                selectinload(Order.order_items).joinedload(OrderItem.item),
            )
            .where(Order.id == order_id)
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_all_by_search(self, order_search: OrderSearch) -> List[Order]:
        """Search orders by member name and status; associations stay unloaded"""
        query = select(Order).join(Order.member)

        if order_search.order_status is not None:
            query = query.where(Order.status == order_search.order_status)
        if order_search.member_name:
            query = query.where(Member.name.contains(order_search.member_name))

        query = query.order_by(Order.id).limit(self.search_limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    def _select_with_member_delivery(self) -> Select:
        return (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
        )

    async def find_all_with_member_delivery(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """Fetch join of the to-one associations; safe to page"""
        query = self._select_with_member_delivery().order_by(Order.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_all_with_member_delivery_items(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """To-one fetch join, plus one IN query per collection level for the page"""
        query = (
            self._select_with_member_delivery()
            .options(selectinload(Order.order_items).selectinload(OrderItem.item))
            .order_by(Order.id)
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_all_with_item(self) -> List[Order]:
        """Fetch join of member, delivery, lines and items in a single query.

        Rows repeat per order line, so parents are de-duplicated with
        ``unique()``. Paging this query would page rows, not orders.
        """
        query = (
            self._select_with_member_delivery()
            .join(Order.order_items)
            .join(OrderItem.item)
            .options(contains_eager(Order.order_items).contains_eager(OrderItem.item))
            .order_by(Order.id, OrderItem.id)
        )
        result = await self.session.execute(query)
        return list(result.unique().scalars().all())
