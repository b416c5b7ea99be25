"""
Shop Service Models

This module contains all database models for the Shop Service.
All models inherit from ShopServiceBaseModel which provides common fields.
"""

from .base import Address, ShopServiceBase, ShopServiceBaseModel
from .item import Album, Book, Item, Movie
from .member import Member
from .order import Delivery, DeliveryStatus, Order, OrderItem, OrderStatus

__all__ = [
    # Base classes
    "ShopServiceBase",
    "ShopServiceBaseModel",
    "Address",
    # Member models
    "Member",
    # Item models
    "Item",
    "Book",
    "Album",
    "Movie",
    # Order models
    "Order",
    "OrderItem",
    "OrderStatus",
    "Delivery",
    "DeliveryStatus",
]
