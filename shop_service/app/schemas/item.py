from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ItemType = Literal["book", "album", "movie"]


class ItemCreateRequest(BaseModel):
    item_type: ItemType = "book"
    name: str = Field(..., min_length=1, max_length=255, examples=["JPA1 BOOK"])
    price: int = Field(..., ge=0, examples=[10000])
    stock_quantity: int = Field(..., ge=0, examples=[100])

    # Book
    author: Optional[str] = None
    isbn: Optional[str] = None
    # Album
    artist: Optional[str] = None
    etc: Optional[str] = None
    # Movie
    director: Optional[str] = None
    actor: Optional[str] = None


class ItemUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: int = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)


class ItemResponse(BaseModel):
    id: int
    dtype: str
    name: str
    price: int
    stock_quantity: int

    author: Optional[str] = None
    isbn: Optional[str] = None
    artist: Optional[str] = None
    etc: Optional[str] = None
    director: Optional[str] = None
    actor: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
