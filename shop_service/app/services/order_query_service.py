"""
Order read service.

Each ``orders_v*`` method returns the same orders through a different query
shape, from per-attribute lazy loading up to a single flat query:

* v1: entities exposed directly, associations loaded lazily
* v2: entities mapped to DTOs, associations loaded lazily (1 + N + N...)
* v3: full fetch join, collection included (1 query, not pageable)
* v3.1: to-one fetch join + batched collection load (pageable)
* v4: DTO columns queried directly, items per order (1 + N)
* v5: DTO columns queried directly, items in one IN query (1 + 1)
* v6: one flat query grouped into nested DTOs in memory (1 query)
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.order import Order
from ..repository.order_query_repository import OrderQueryRepository
from ..repository.order_repository import OrderRepository
from ..schemas.order import (
    OrderDto,
    OrderEntity,
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSearch,
    SimpleOrderDto,
    SimpleOrderEntity,
)
from ..utils.logging import setup_shop_logging as setup_logging

logger = setup_logging("shop_service.order_queries")


def group_flat_orders(flats: Iterable[OrderFlatDto]) -> List[OrderQueryDto]:
    """Group flat order-line rows into one OrderQueryDto per order.

    Orders keep the order in which their ID first appears in ``flats``.
    """
    grouped: Dict[int, OrderQueryDto] = {}
    for flat in flats:
        order = grouped.get(flat.order_id)
        if order is None:
            order = OrderQueryDto(
                order_id=flat.order_id,
                name=flat.name,
                order_date=flat.order_date,
                order_status=flat.order_status,
                address=flat.address,
            )
            grouped[flat.order_id] = order

        order.order_items.append(
            OrderItemQueryDto(
                order_id=flat.order_id,
                item_name=flat.item_name,
                order_price=flat.order_price,
                count=flat.count,
            )
        )
    return list(grouped.values())


class OrderQueryService:
    def __init__(self, session: AsyncSession, search_limit: int = 1000):
        self.session = session
        self.order_repository = OrderRepository(session, search_limit=search_limit)
        self.order_query_repository = OrderQueryRepository(session)

    @staticmethod
    async def _initialize_lazy(order: Order, with_items: bool = True) -> None:
        """Load each association with its own query, one attribute at a time"""
        await order.awaitable_attrs.member
        await order.awaitable_attrs.delivery
        if with_items:
            order_items = await order.awaitable_attrs.order_items
            for order_item in order_items:
                await order_item.awaitable_attrs.item

    async def _find_all_lazy(
        self, order_search: Optional[OrderSearch] = None, with_items: bool = True
    ) -> List[Order]:
        orders = await self.order_repository.find_all_by_search(
            order_search or OrderSearch()
        )
        for order in orders:
            await self._initialize_lazy(order, with_items=with_items)
        return orders

    # =====================================================
    # ORDER LADDER
    # =====================================================

    async def orders_v1(self) -> List[OrderEntity]:
        orders = await self._find_all_lazy()
        return [OrderEntity.model_validate(order) for order in orders]

    async def orders_v2(self) -> List[OrderDto]:
        orders = await self._find_all_lazy()
        return [OrderDto.from_entity(order) for order in orders]

    async def orders_v3(self) -> List[OrderDto]:
        orders = await self.order_repository.find_all_with_item()
        return [OrderDto.from_entity(order) for order in orders]

    async def orders_v3_page(self, offset: int = 0, limit: int = 100) -> List[OrderDto]:
        orders = await self.order_repository.find_all_with_member_delivery_items(
            offset=offset, limit=limit
        )
        return [OrderDto.from_entity(order) for order in orders]

    async def orders_v4(self) -> List[OrderQueryDto]:
        return await self.order_query_repository.find_order_query_dtos()

    async def orders_v5(self) -> List[OrderQueryDto]:
        return await self.order_query_repository.find_all_by_dto_optimization()

    async def orders_v6(self) -> List[OrderQueryDto]:
        flats = await self.order_query_repository.find_all_by_dto_flat()
        orders = group_flat_orders(flats)
        logger.debug(
            "Grouped flat order rows",
            extra={"rows": len(flats), "orders": len(orders)},
        )
        return orders

    # =====================================================
    # SIMPLE ORDER LADDER (member and delivery only)
    # =====================================================

    async def simple_orders_v1(self) -> List[SimpleOrderEntity]:
        orders = await self._find_all_lazy(with_items=False)
        return [SimpleOrderEntity.model_validate(order) for order in orders]

    async def simple_orders_v2(self) -> List[SimpleOrderDto]:
        orders = await self._find_all_lazy(with_items=False)
        return [SimpleOrderDto.from_entity(order) for order in orders]

    async def simple_orders_v3(self) -> List[SimpleOrderDto]:
        orders = await self.order_repository.find_all_with_member_delivery()
        return [SimpleOrderDto.from_entity(order) for order in orders]

    async def simple_orders_v4(self) -> List[SimpleOrderDto]:
        return await self.order_query_repository.find_order_simple_dtos()

    # =====================================================
    # SEARCH
    # =====================================================

    async def search_orders(self, order_search: OrderSearch) -> List[OrderDto]:
        orders = await self._find_all_lazy(order_search)
        return [OrderDto.from_entity(order) for order in orders]
