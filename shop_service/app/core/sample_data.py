"""Sample members, books and orders for local runs of the order endpoints."""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import Address
from ..models.item import Book
from ..models.member import Member
from ..models.order import Delivery, Order, OrderItem
from ..utils.logging import setup_shop_logging as setup_logging

logger = setup_logging("shop_service.sample_data")


def _create_member(name: str, city: str, street: str, zipcode: str) -> Member:
    return Member(name=name, address=Address(city=city, street=street, zipcode=zipcode))


def _create_book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def _create_delivery(member: Member) -> Delivery:
    return Delivery(address=Address(member.city, member.street, member.zipcode))


def build_sample_orders() -> List[Order]:
    """Two members, each ordering two books"""
    member_a = _create_member("userA", "Seoul", "1", "1111")
    book1 = _create_book("JPA1 BOOK", 10000, 100)
    book2 = _create_book("JPA2 BOOK", 20000, 100)
    order_a = Order.create_order(
        member_a,
        _create_delivery(member_a),
        OrderItem.create_order_item(book1, 10000, 1),
        OrderItem.create_order_item(book2, 20000, 2),
    )

    member_b = _create_member("userB", "Jinju", "2", "2222")
    book3 = _create_book("SPRING1 BOOK", 20000, 200)
    book4 = _create_book("SPRING2 BOOK", 40000, 300)
    order_b = Order.create_order(
        member_b,
        _create_delivery(member_b),
        OrderItem.create_order_item(book3, 20000, 3),
        OrderItem.create_order_item(book4, 40000, 4),
    )

    return [order_a, order_b]


async def init_sample_data(session: AsyncSession) -> bool:
    """Insert the sample orders unless members already exist"""
    member_count = await session.scalar(select(func.count(Member.id)))
    if member_count:
        logger.info(
            "Sample data skipped: members already present",
            extra={"member_count": member_count},
        )
        return False

    orders = build_sample_orders()
    session.add_all(orders)
    await session.commit()

    logger.info("Sample data inserted", extra={"orders": len(orders)})
    return True
