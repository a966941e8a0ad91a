import datetime as dt
from typing import List, Optional

from pydantic import Field

from affirmations.schemas.common import CamelModel, Patch, RecordOut


class CollectionCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool = False


class CollectionPatch(Patch):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: Optional[bool] = None


class CollectionOut(RecordOut):
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool
    created_at: dt.datetime
    updated_at: dt.datetime


class CollectionData(CamelModel):
    collection: CollectionOut


class CollectionList(CamelModel):
    items: List[CollectionOut]
    total: int
