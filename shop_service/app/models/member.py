from typing import TYPE_CHECKING, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from .base import Address, ShopServiceBaseModel

if TYPE_CHECKING:
    from .order import Order


class Member(ShopServiceBaseModel):
    __tablename__ = "members"

    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )

    # Embedded address columns
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    # Inverse side of Order.member, never serialized
    orders: Mapped[list["Order"]] = relationship("Order", viewonly=True)
