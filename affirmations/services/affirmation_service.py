import logging
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from affirmations.db.models.affirmation import Affirmation
from affirmations.db.session import commit_or_rollback
from affirmations.errors import NotFoundError
from affirmations.schemas.affirmation import AffirmationCreate, AffirmationPatch
from affirmations.services.collection_service import CollectionService
from affirmations.utils.clock import utcnow

logger = logging.getLogger(__name__)


class AffirmationService:
    @staticmethod
    async def get_owned(db: AsyncSession, user_id: str, affirmation_id: str) -> Affirmation:
        affirmation = await db.scalar(
            sa.select(Affirmation).where(
                Affirmation.id == affirmation_id,
                Affirmation.user_id == user_id
            )
        )

        if not affirmation:
            logger.info("Affirmation not found", extra={"user_id": user_id, "affirmation_id": affirmation_id})
            raise NotFoundError("Affirmation")

        return affirmation

    @staticmethod
    def build(user_id: str, data: AffirmationCreate) -> Affirmation:
        """Build an unsaved user-authored affirmation. The collection must already be checked."""
        now = utcnow()
        return Affirmation(
            collection_id=data.collection_id,
            user_id=user_id,
            text=data.text,
            category=data.category,
            language=data.language,
            tags=data.tags,
            use_time_of_day=data.use_time_of_day,
            is_favorite=data.is_favorite,
            is_system=False,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    async def create(cls, db: AsyncSession, user_id: str, data: AffirmationCreate) -> Affirmation:
        if data.collection_id:
            await CollectionService.get_owned(db, user_id, data.collection_id)

        affirmation = cls.build(user_id, data)

        db.add(affirmation)
        await commit_or_rollback(db)
        await db.refresh(affirmation)

        logger.info(
            "Affirmation created",
            extra={"user_id": user_id, "affirmation_id": affirmation.id, "collection_id": affirmation.collection_id},
        )
        return affirmation

    @classmethod
    async def update(
        cls,
        db: AsyncSession,
        user_id: str,
        affirmation_id: str,
        patch: AffirmationPatch,
    ) -> Affirmation:
        affirmation = await cls.get_owned(db, user_id, affirmation_id)

        # A null collection_id uncategorizes and has nothing to check.
        collection_id = patch.changes().get("collection_id")
        if collection_id is not None:
            await CollectionService.get_owned(db, user_id, collection_id)

        patch.apply_to(affirmation, utcnow())
        await commit_or_rollback(db)
        await db.refresh(affirmation)

        logger.info("Affirmation updated", extra={"user_id": user_id, "affirmation_id": affirmation_id})
        return affirmation

    @classmethod
    async def delete(cls, db: AsyncSession, user_id: str, affirmation_id: str) -> None:
        affirmation = await cls.get_owned(db, user_id, affirmation_id)

        await db.delete(affirmation)
        await commit_or_rollback(db)

        logger.info("Affirmation deleted", extra={"user_id": user_id, "affirmation_id": affirmation_id})

    @staticmethod
    async def list_owned(
        db: AsyncSession,
        user_id: str,
        collection_id: Optional[str] = None,
        favorites_only: bool = False,
    ) -> List[Affirmation]:
        query = sa.select(Affirmation).where(Affirmation.user_id == user_id)

        if collection_id:
            query = query.where(Affirmation.collection_id == collection_id)

        if favorites_only:
            query = query.where(Affirmation.is_favorite.is_(True))

        affirmations = await db.scalars(query)
        return list(affirmations)
