"""
Read-only queries that select order DTO columns directly instead of entities.
"""

from collections import defaultdict
from typing import Any, Dict, List, Mapping

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.item import Item
from ..models.member import Member
from ..models.order import Delivery, Order, OrderItem
from ..schemas.member import AddressSchema
from ..schemas.order import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    SimpleOrderDto,
)


def _address(row: Mapping[str, Any]) -> AddressSchema:
    return AddressSchema(city=row["city"], street=row["street"], zipcode=row["zipcode"])


class OrderQueryRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    # =====================================================
    # ROOT QUERIES
    # =====================================================

    def _select_order_columns(self) -> Select:
        return (
            select(
                Order.id.label("order_id"),
                Member.name.label("name"),
                Order.order_date,
                Order.status.label("order_status"),
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )

    async def _find_orders(self) -> List[OrderQueryDto]:
        result = await self.session.execute(self._select_order_columns())
        return [
            OrderQueryDto(
                order_id=row["order_id"],
                name=row["name"],
                order_date=row["order_date"],
                order_status=row["order_status"],
                address=_address(row),
            )
            for row in result.mappings()
        ]

    async def find_order_simple_dtos(self) -> List[SimpleOrderDto]:
        result = await self.session.execute(self._select_order_columns())
        return [
            SimpleOrderDto(
                order_id=row["order_id"],
                name=row["name"],
                order_date=row["order_date"],
                order_status=row["order_status"],
                address=_address(row),
            )
            for row in result.mappings()
        ]

    # =====================================================
    # ORDER ITEM QUERIES
    # =====================================================

    def _select_order_item_columns(self) -> Select:
        return (
            select(
                OrderItem.order_id,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count,
            )
            .select_from(OrderItem)
            .join(OrderItem.item)
            .order_by(OrderItem.order_id, OrderItem.id)
        )

    async def _find_order_items(self, order_id: int) -> List[OrderItemQueryDto]:
        query = self._select_order_item_columns().where(OrderItem.order_id == order_id)
        result = await self.session.execute(query)
        return [OrderItemQueryDto(**row) for row in result.mappings()]

    async def _find_order_item_map(
        self, order_ids: List[int]
    ) -> Dict[int, List[OrderItemQueryDto]]:
        query = self._select_order_item_columns().where(
            OrderItem.order_id.in_(order_ids)
        )
        result = await self.session.execute(query)

        order_item_map: Dict[int, List[OrderItemQueryDto]] = defaultdict(list)
        for row in result.mappings():
            order_item_map[row["order_id"]].append(OrderItemQueryDto(**row))
        return order_item_map

    # =====================================================
    # PUBLIC DTO QUERIES
    # =====================================================

    async def find_order_query_dtos(self) -> List[OrderQueryDto]:
        """Root query plus one item query per order (1 + N)"""
        orders = await self._find_orders()
        for order in orders:
            order.order_items = await self._find_order_items(order.order_id)
        return orders

    async def find_all_by_dto_optimization(self) -> List[OrderQueryDto]:
        """Root query plus one IN query for every order's items (1 + 1)"""
        orders = await self._find_orders()
        if not orders:
            return orders

        order_item_map = await self._find_order_item_map(
            [order.order_id for order in orders]
        )
        for order in orders:
            order.order_items = order_item_map.get(order.order_id, [])
        return orders

    async def find_all_by_dto_flat(self) -> List[OrderFlatDto]:
        """Single joined query, one row per order line"""
        query = (
            select(
                Order.id.label("order_id"),
                Member.name.label("name"),
                Order.order_date,
                Order.status.label("order_status"),
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        result = await self.session.execute(query)
        return [
            OrderFlatDto(
                order_id=row["order_id"],
                name=row["name"],
                order_date=row["order_date"],
                order_status=row["order_status"],
                address=_address(row),
                item_name=row["item_name"],
                order_price=row["order_price"],
                count=row["count"],
            )
            for row in result.mappings()
        ]
