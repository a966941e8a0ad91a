import datetime as dt
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field, field_validator

from affirmations.schemas.common import CamelModel, Patch, RecordOut
from affirmations.utils.types import TimeOfDay


class AffirmationCreate(CamelModel):
    text: str = Field(min_length=1)
    collection_id: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    tags: Optional[str] = None
    use_time_of_day: Optional[TimeOfDay] = None
    is_favorite: bool = False

    @field_validator("collection_id")
    @classmethod
    def blank_collection_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class AffirmationPatch(Patch):
    # An explicit null collectionId moves the affirmation out of its collection.
    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"collection_id"})

    text: Optional[str] = Field(None, min_length=1)
    collection_id: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    tags: Optional[str] = None
    use_time_of_day: Optional[TimeOfDay] = None
    is_favorite: Optional[bool] = None

    @field_validator("collection_id")
    @classmethod
    def blank_collection_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class AffirmationOut(RecordOut):
    id: str
    collection_id: Optional[str] = None
    user_id: str
    text: str
    category: Optional[str] = None
    language: Optional[str] = None
    tags: Optional[str] = None
    use_time_of_day: Optional[TimeOfDay] = None
    is_favorite: bool
    is_system: bool
    created_at: dt.datetime
    updated_at: dt.datetime


class AffirmationData(CamelModel):
    affirmation: AffirmationOut


class AffirmationList(CamelModel):
    items: List[AffirmationOut]
    total: int
