import logging
from typing import List

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from affirmations.db.models.affirmation import Affirmation
from affirmations.db.models.collection import Collection
from affirmations.db.session import commit_or_rollback
from affirmations.errors import NotFoundError
from affirmations.schemas.collection import CollectionCreate, CollectionPatch
from affirmations.utils.clock import utcnow

logger = logging.getLogger(__name__)


class CollectionService:
    @staticmethod
    async def get_owned(db: AsyncSession, user_id: str, collection_id: str) -> Collection:
        collection = await db.scalar(
            sa.select(Collection).where(
                Collection.id == collection_id,
                Collection.user_id == user_id
            )
        )

        if not collection:
            logger.info("Collection not found", extra={"user_id": user_id, "collection_id": collection_id})
            raise NotFoundError("Collection")

        return collection

    @classmethod
    async def create(cls, db: AsyncSession, user_id: str, data: CollectionCreate) -> Collection:
        now = utcnow()
        collection = Collection(
            user_id=user_id,
            name=data.name,
            description=data.description,
            icon=data.icon,
            is_default=data.is_default,
            created_at=now,
            updated_at=now,
        )

        db.add(collection)
        await commit_or_rollback(db)
        await db.refresh(collection)

        logger.info("Collection created", extra={"user_id": user_id, "collection_id": collection.id})
        return collection

    @classmethod
    async def update(
        cls,
        db: AsyncSession,
        user_id: str,
        collection_id: str,
        patch: CollectionPatch,
    ) -> Collection:
        collection = await cls.get_owned(db, user_id, collection_id)

        patch.apply_to(collection, utcnow())
        await commit_or_rollback(db)
        await db.refresh(collection)

        logger.info("Collection updated", extra={"user_id": user_id, "collection_id": collection_id})
        return collection

    @classmethod
    async def delete(cls, db: AsyncSession, user_id: str, collection_id: str) -> None:
        """Delete a collection together with the caller's affirmations in it.

        Both deletes run in one transaction; nothing is removed if either fails.
        """
        collection = await cls.get_owned(db, user_id, collection_id)

        try:
            result = await db.execute(
                sa.delete(Affirmation).where(
                    Affirmation.collection_id == collection.id,
                    Affirmation.user_id == user_id
                )
            )
            await db.delete(collection)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "Collection deleted with %d affirmation(s)", result.rowcount,
            extra={"user_id": user_id, "collection_id": collection_id},
        )

    @staticmethod
    async def list_owned(db: AsyncSession, user_id: str) -> List[Collection]:
        collections = await db.scalars(
            sa.select(Collection).where(Collection.user_id == user_id)
        )
        return list(collections)
