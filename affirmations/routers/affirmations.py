from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from affirmations.db.session import get_db
from affirmations.schemas.affirmation import (
    AffirmationCreate,
    AffirmationData,
    AffirmationList,
    AffirmationOut,
    AffirmationPatch,
)
from affirmations.schemas.common import Envelope, SuccessOut
from affirmations.services.affirmation_service import AffirmationService
from affirmations.services.auth_service import AuthService, CurrentUser

router = APIRouter(prefix="/affirmations", tags=["affirmations"])


def _affirmation_envelope(affirmation) -> Envelope[AffirmationData]:
    return Envelope[AffirmationData](data=AffirmationData(affirmation=AffirmationOut.model_validate(affirmation)))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[AffirmationData])
async def create_affirmation(
    affirmation_data: AffirmationCreate,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    affirmation = await AffirmationService.create(db, user.id, affirmation_data)
    return _affirmation_envelope(affirmation)


@router.get("", status_code=status.HTTP_200_OK, response_model=Envelope[AffirmationList])
async def list_affirmations(
    collection_id: Optional[str] = Query(None, alias="collectionId"),
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    affirmations = await AffirmationService.list_owned(db, user.id, collection_id, favorites_only)
    items = [AffirmationOut.model_validate(affirmation) for affirmation in affirmations]
    return Envelope[AffirmationList](data=AffirmationList(items=items, total=len(items)))


@router.get("/{affirmation_id}", status_code=status.HTTP_200_OK, response_model=Envelope[AffirmationData])
async def get_affirmation(
    affirmation_id: str,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    affirmation = await AffirmationService.get_owned(db, user.id, affirmation_id)
    return _affirmation_envelope(affirmation)


@router.patch("/{affirmation_id}", status_code=status.HTTP_200_OK, response_model=Envelope[AffirmationData])
async def update_affirmation(
    affirmation_id: str,
    affirmation_patch: AffirmationPatch,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    affirmation = await AffirmationService.update(db, user.id, affirmation_id, affirmation_patch)
    return _affirmation_envelope(affirmation)


@router.delete("/{affirmation_id}", status_code=status.HTTP_200_OK, response_model=SuccessOut)
async def delete_affirmation(
    affirmation_id: str,
    user: CurrentUser = Depends(AuthService.get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await AffirmationService.delete(db, user.id, affirmation_id)
    return SuccessOut()
