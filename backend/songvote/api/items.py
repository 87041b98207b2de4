"""Item API endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from songvote.core.exceptions import NotFoundError
from songvote.dependencies import get_db
from songvote.schemas.item import ItemCreateRequest, ItemResponse
from songvote.services.item_service import ItemService

router = APIRouter()


@router.get("", response_model=List[ItemResponse])
async def list_items(db: AsyncSession = Depends(get_db)):
    service = ItemService(db)
    return await service.list_items()


@router.post("", response_model=ItemResponse)
async def create_item(body: ItemCreateRequest, db: AsyncSession = Depends(get_db)):
    service = ItemService(db)
    return await service.create_item(name=body.name, description=body.description)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
    service = ItemService(db)
    item = await service.get_item(item_id)
    if not item:
        raise NotFoundError("Item", str(item_id))
    return item


@router.delete("/{item_id}")
async def delete_item(item_id: int, db: AsyncSession = Depends(get_db)):
    service = ItemService(db)
    if not await service.delete_item(item_id):
        raise NotFoundError("Item", str(item_id))
    return {"deleted": True}
