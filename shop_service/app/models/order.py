from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from ..core.exceptions import IllegalStateError
from .base import Address, ShopServiceBaseModel
from .item import Item
from .member import Member


class OrderStatus(Enum):
    ORDER = "ORDER"
    CANCEL = "CANCEL"


class DeliveryStatus(Enum):
    READY = "READY"
    COMP = "COMP"


class Delivery(ShopServiceBaseModel):
    __tablename__ = "deliveries"

    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    status: Mapped[DeliveryStatus] = mapped_column(
        SQLEnum(DeliveryStatus, name="delivery_status"),
        nullable=False,
        default=DeliveryStatus.READY,
    )

    order: Mapped[Optional["Order"]] = relationship(
        "Order", back_populates="delivery", uselist=False
    )


class Order(ShopServiceBaseModel):
    __tablename__ = "orders"

    member_id: Mapped[int] = mapped_column(ForeignKey("members.id"), nullable=False)
    delivery_id: Mapped[int] = mapped_column(
        ForeignKey("deliveries.id"), nullable=False
    )

    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        nullable=False,
    )
    status: Mapped[OrderStatus] = mapped_column(
        SQLEnum(OrderStatus, name="order_status"),
        nullable=False,
        default=OrderStatus.ORDER,
    )

    member: Mapped[Member] = relationship("Member")
    order_items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    delivery: Mapped[Delivery] = relationship(
        "Delivery", back_populates="order", cascade="all"
    )

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)
        order_item.order = self

    def set_delivery(self, delivery: Delivery) -> None:
        self.delivery = delivery
        delivery.order = self

    @classmethod
    def create_order(
        cls, member: Member, delivery: Delivery, *order_items: "OrderItem"
    ) -> "Order":
        """Build a new order; the lines must already have reserved their stock."""
        order = cls()
        order.member = member
        order.set_delivery(delivery)
        for order_item in order_items:
            order.add_order_item(order_item)
        order.status = OrderStatus.ORDER
        order.order_date = datetime.now(timezone.utc).replace(tzinfo=None)
        return order

    def cancel(self) -> None:
        """Cancel the order and return every line's stock.

        Requires ``delivery`` and ``order_items`` (with their items) loaded.
        """
        if self.delivery.status == DeliveryStatus.COMP:
            raise IllegalStateError(
                "Orders that have already been delivered cannot be cancelled."
            )
        if self.status == OrderStatus.CANCEL:
            raise IllegalStateError("Order has already been cancelled.")

        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    @property
    def total_price(self) -> int:
        return sum(order_item.total_price for order_item in self.order_items)


class OrderItem(ShopServiceBaseModel):
    __tablename__ = "order_items"

    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False)

    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[Order] = relationship("Order", back_populates="order_items")
    item: Mapped[Item] = relationship("Item")

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        return self.order_price * self.count
