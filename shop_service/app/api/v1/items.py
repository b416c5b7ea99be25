"""Item API endpoints"""

from typing import List

from fastapi import APIRouter, status

from ...schemas.item import ItemCreateRequest, ItemResponse, ItemUpdateRequest
from ...services.item_service import ItemService
from ..dependencies import ItemServiceDep

router = APIRouter(prefix="/api/items")


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreateRequest,
    item_service: ItemService = ItemServiceDep,
) -> ItemResponse:
    """Create a book, album or movie"""
    item = await item_service.save_item(ItemService.build_item(item_data))
    return ItemResponse.model_validate(item)


@router.get("", response_model=List[ItemResponse])
async def list_items(
    item_service: ItemService = ItemServiceDep,
) -> List[ItemResponse]:
    items = await item_service.find_items()
    return [ItemResponse.model_validate(item) for item in items]


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    item_service: ItemService = ItemServiceDep,
) -> ItemResponse:
    item = await item_service.find_one(item_id)
    return ItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    item_data: ItemUpdateRequest,
    item_service: ItemService = ItemServiceDep,
) -> ItemResponse:
    item = await item_service.update_item(
        item_id,
        name=item_data.name,
        price=item_data.price,
        stock_quantity=item_data.stock_quantity,
    )
    return ItemResponse.model_validate(item)
