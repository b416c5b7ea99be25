"""
Order service: order placement, cancellation and search.
"""

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.order import Delivery, DeliveryStatus, Order, OrderItem
from ..repository.item_repository import ItemRepository
from ..repository.member_repository import MemberRepository
from ..repository.order_repository import OrderRepository
from ..schemas.order import OrderSearch
from ..utils.logging import setup_shop_logging as setup_logging

logger = setup_logging("shop_service.orders")


class OrderService:
    def __init__(self, session: AsyncSession, search_limit: int = 1000):
        self.session = session
        self.order_repository = OrderRepository(session, search_limit=search_limit)
        self.member_repository = MemberRepository(session)
        self.item_repository = ItemRepository(session)

    async def order(self, member_id: int, item_id: int, count: int) -> int:
        """Place an order for ``count`` units of one item and return the order ID"""
        member = await self.member_repository.find_one(member_id)
        if not member:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Member not found"
            )
        item = await self.item_repository.find_one(item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
            )

        # Ship to the member's registered address
        delivery = Delivery(
            city=member.city,
            street=member.street,
            zipcode=member.zipcode,
            status=DeliveryStatus.READY,
        )

        order_item = OrderItem.create_order_item(item, item.price, count)
        order = Order.create_order(member, delivery, order_item)

        await self.order_repository.save(order)
        await self.session.commit()

        logger.info(
            "Order placed",
            extra={
                "order_id": order.id,
                "member_id": member_id,
                "item_id": item_id,
                "count": count,
                "event_type": "order_placed",
            },
        )
        return order.id

    async def cancel_order(self, order_id: int) -> Order:
        order = await self.order_repository.find_one_with_items(order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Order not found"
            )

        order.cancel()
        await self.session.commit()

        logger.info(
            "Order cancelled",
            extra={"order_id": order_id, "event_type": "order_cancelled"},
        )
        return order

    async def find_orders(self, order_search: OrderSearch) -> List[Order]:
        return await self.order_repository.find_all_by_search(order_search)
