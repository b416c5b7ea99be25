from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.order import DeliveryStatus, Order, OrderItem, OrderStatus
from .member import AddressSchema, MemberEntity

# --------------------------------------------------------------
# Entity-shaped schemas (back references omitted)
# --------------------------------------------------------------


class ItemEntity(BaseModel):
    id: int
    name: str
    price: int
    stock_quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderItemEntity(BaseModel):
    id: int
    item: ItemEntity
    order_price: int
    count: int
    total_price: int

    model_config = ConfigDict(from_attributes=True)


class DeliveryEntity(BaseModel):
    id: int
    address: Optional[AddressSchema] = None
    status: DeliveryStatus

    model_config = ConfigDict(from_attributes=True)


class SimpleOrderEntity(BaseModel):
    id: int
    member: MemberEntity
    delivery: DeliveryEntity
    order_date: datetime
    status: OrderStatus

    model_config = ConfigDict(from_attributes=True)


class OrderEntity(SimpleOrderEntity):
    order_items: List[OrderItemEntity]
    total_price: int


# --------------------------------------------------------------
# DTOs built from entities
# --------------------------------------------------------------


class OrderItemDto(BaseModel):
    item_name: str
    order_price: int
    count: int

    @classmethod
    def from_entity(cls, order_item: OrderItem) -> "OrderItemDto":
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class SimpleOrderDto(BaseModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressSchema

    @classmethod
    def from_entity(cls, order: Order) -> "SimpleOrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressSchema.from_columns(order.delivery),
        )


class OrderDto(SimpleOrderDto):
    order_items: List[OrderItemDto]

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressSchema.from_columns(order.delivery),
            order_items=[OrderItemDto.from_entity(oi) for oi in order.order_items],
        )


# --------------------------------------------------------------
# DTOs selected directly by queries
# --------------------------------------------------------------


class OrderItemQueryDto(BaseModel):
    order_id: int = Field(..., exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(BaseModel):
    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressSchema
    order_items: List[OrderItemQueryDto] = []


class OrderFlatDto(BaseModel):
    """One joined row per order line."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressSchema

    item_name: str
    order_price: int
    count: int


# --------------------------------------------------------------
# Order placement and search
# --------------------------------------------------------------


class OrderSearch(BaseModel):
    member_name: Optional[str] = None
    order_status: Optional[OrderStatus] = None


class CreateOrderRequest(BaseModel):
    member_id: int
    item_id: int
    count: int = Field(..., gt=0)


class CreateOrderResponse(BaseModel):
    order_id: int


class CancelOrderResponse(BaseModel):
    order_id: int
    status: OrderStatus
