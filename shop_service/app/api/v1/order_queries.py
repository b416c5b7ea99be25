"""
Order read endpoints, one per query strategy.

All versions return the same orders; they differ only in response shape and
in how many queries are issued to build it.
"""

from typing import List

from fastapi import APIRouter, Query

from ...core.settings import get_settings
from ...schemas.order import (
    OrderDto,
    OrderEntity,
    OrderQueryDto,
    SimpleOrderDto,
    SimpleOrderEntity,
)
from ...services.order_query_service import OrderQueryService
from ..dependencies import OrderQueryServiceDep

router = APIRouter()


# =====================================================
# ORDERS WITH ITEMS
# =====================================================


@router.get("/api/v1/orders", response_model=List[OrderEntity])
async def orders_v1(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderEntity]:
    """Entities exposed directly; every association loaded lazily"""
    return await order_query_service.orders_v1()


@router.get("/api/v2/orders", response_model=List[OrderDto])
async def orders_v2(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderDto]:
    """Entities mapped to DTOs; every association loaded lazily"""
    return await order_query_service.orders_v2()


@router.get("/api/v3/orders", response_model=List[OrderDto])
async def orders_v3(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderDto]:
    """Single fetch-join query including the item collection; not pageable"""
    return await order_query_service.orders_v3()


@router.get("/api/v3.1/orders", response_model=List[OrderDto])
async def orders_v3_page(
    offset: int = Query(0, ge=0, description="Number of orders to skip"),
    limit: int = Query(
        get_settings().DEFAULT_PAGE_LIMIT, ge=1, description="Number of orders"
    ),
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderDto]:
    """To-one fetch join, batched collection loading; pageable"""
    return await order_query_service.orders_v3_page(offset=offset, limit=limit)


@router.get("/api/v4/orders", response_model=List[OrderQueryDto])
async def orders_v4(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderQueryDto]:
    """DTOs queried directly, items queried per order (1 + N)"""
    return await order_query_service.orders_v4()


@router.get("/api/v5/orders", response_model=List[OrderQueryDto])
async def orders_v5(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderQueryDto]:
    """DTOs queried directly, items queried once for all orders (1 + 1)"""
    return await order_query_service.orders_v5()


@router.get("/api/v6/orders", response_model=List[OrderQueryDto])
async def orders_v6(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderQueryDto]:
    """One flat query grouped into nested DTOs; not pageable by order"""
    return await order_query_service.orders_v6()


# =====================================================
# ORDERS WITH MEMBER AND DELIVERY ONLY
# =====================================================


@router.get("/api/v1/simple-orders", response_model=List[SimpleOrderEntity])
async def simple_orders_v1(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[SimpleOrderEntity]:
    return await order_query_service.simple_orders_v1()


@router.get("/api/v2/simple-orders", response_model=List[SimpleOrderDto])
async def simple_orders_v2(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[SimpleOrderDto]:
    return await order_query_service.simple_orders_v2()


@router.get("/api/v3/simple-orders", response_model=List[SimpleOrderDto])
async def simple_orders_v3(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[SimpleOrderDto]:
    return await order_query_service.simple_orders_v3()


@router.get("/api/v4/simple-orders", response_model=List[SimpleOrderDto])
async def simple_orders_v4(
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[SimpleOrderDto]:
    return await order_query_service.simple_orders_v4()
