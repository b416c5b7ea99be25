from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.exceptions import NotEnoughStockError
from .base import ShopServiceBaseModel


class Item(ShopServiceBaseModel):
    """Catalog item. Subtypes share the ``items`` table, told apart by ``dtype``."""

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "dtype",
        "polymorphic_identity": "I",
    }

    def add_stock(self, quantity: int) -> None:
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        rest_stock = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError("need more stock")
        self.stock_quantity = rest_stock


class Book(Item):
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    isbn: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B", "polymorphic_load": "inline"}


class Album(Item):
    artist: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    etc: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A", "polymorphic_load": "inline"}


class Movie(Item):
    director: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    actor: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M", "polymorphic_load": "inline"}
