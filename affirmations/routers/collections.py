from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from affirmations.db.session import get_db
from affirmations.schemas.collection import (
    CollectionCreate,
    CollectionData,
    CollectionList,
    CollectionOut,
    CollectionPatch,
)
from affirmations.schemas.common import Envelope, SuccessOut
from affirmations.services.auth_service import AuthService, CurrentUser
from affirmations.services.collection_service import CollectionService

router = APIRouter(prefix="/collections", tags=["collections"])


def _collection_envelope(collection) -> Envelope[CollectionData]:
    return Envelope[CollectionData](data=CollectionData(collection=CollectionOut.model_validate(collection)))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[CollectionData])
async def create_collection(
    collection_data: CollectionCreate,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collection = await CollectionService.create(db, user.id, collection_data)
    return _collection_envelope(collection)


@router.get("", status_code=status.HTTP_200_OK, response_model=Envelope[CollectionList])
async def list_collections(
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collections = await CollectionService.list_owned(db, user.id)
    items = [CollectionOut.model_validate(collection) for collection in collections]
    return Envelope[CollectionList](data=CollectionList(items=items, total=len(items)))


@router.get("/{collection_id}", status_code=status.HTTP_200_OK, response_model=Envelope[CollectionData])
async def get_collection(
    collection_id: str,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collection = await CollectionService.get_owned(db, user.id, collection_id)
    return _collection_envelope(collection)


@router.patch("/{collection_id}", status_code=status.HTTP_200_OK, response_model=Envelope[CollectionData])
async def update_collection(
    collection_id: str,
    collection_patch: CollectionPatch,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collection = await CollectionService.update(db, user.id, collection_id, collection_patch)
    return _collection_envelope(collection)


@router.delete("/{collection_id}", status_code=status.HTTP_200_OK, response_model=SuccessOut)
async def delete_collection(
    collection_id: str,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await CollectionService.delete(db, user.id, collection_id)
    return SuccessOut()
