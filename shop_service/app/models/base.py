from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class ShopServiceBase(AsyncAttrs, DeclarativeBase):
    """Base class for all Shop Service database models."""

    pass


class ShopServiceBaseModel(ShopServiceBase):
    """Base model with common fields for Shop Service."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        onupdate=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        nullable=False,
    )


@dataclass
class Address:
    """Embedded address value stored as city/street/zipcode columns."""

    city: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None
