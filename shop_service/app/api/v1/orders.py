"""Order placement, search and cancellation endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from ...models.order import OrderStatus
from ...schemas.order import (
    CancelOrderResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    OrderDto,
    OrderSearch,
)
from ...services.order_query_service import OrderQueryService
from ...services.order_service import OrderService
from ...utils.logging import setup_shop_logging as setup_logging
from ..dependencies import CorrelationIdDep, OrderQueryServiceDep, OrderServiceDep

logger = setup_logging("shop_service.orders_api")
router = APIRouter(prefix="/api/orders")


@router.post(
    "", response_model=CreateOrderResponse, status_code=status.HTTP_201_CREATED
)
async def create_order(
    order_data: CreateOrderRequest,
    correlation_id: Optional[str] = CorrelationIdDep,
    order_service: OrderService = OrderServiceDep,
) -> CreateOrderResponse:
    """Place an order for a single item"""
    order_id = await order_service.order(
        member_id=order_data.member_id,
        item_id=order_data.item_id,
        count=order_data.count,
    )
    logger.info(
        "Order created via API",
        extra={"order_id": order_id, "correlation_id": correlation_id},
    )
    return CreateOrderResponse(order_id=order_id)


@router.get("", response_model=List[OrderDto])
async def search_orders(
    member_name: Optional[str] = Query(None, description="Member name contains"),
    order_status: Optional[OrderStatus] = Query(None, description="Order status"),
    order_query_service: OrderQueryService = OrderQueryServiceDep,
) -> List[OrderDto]:
    """Search orders by member name and status"""
    return await order_query_service.search_orders(
        OrderSearch(member_name=member_name, order_status=order_status)
    )


@router.post("/{order_id}/cancel", response_model=CancelOrderResponse)
async def cancel_order(
    order_id: int,
    correlation_id: Optional[str] = CorrelationIdDep,
    order_service: OrderService = OrderServiceDep,
) -> CancelOrderResponse:
    """Cancel an order and restore its stock"""
    order = await order_service.cancel_order(order_id)
    logger.info(
        "Order cancelled via API",
        extra={"order_id": order_id, "correlation_id": correlation_id},
    )
    return CancelOrderResponse(order_id=order.id, status=order.status)
