import datetime as dt
from typing import ClassVar, FrozenSet, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class SuccessOut(BaseModel):
    success: bool = True


class Patch(CamelModel):
    """A set of optional fields overlaid onto a stored record.

    A field counts as supplied when it was present in the input. Only fields
    named in ``NULLABLE_FIELDS`` may be explicitly null.
    """

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data):
        if not isinstance(data, dict):
            return data

        for name, field in cls.model_fields.items():
            if name in cls.NULLABLE_FIELDS:
                continue
            alias = field.alias or name
            if data.get(name, ...) is None or data.get(alias, ...) is None:
                raise ValueError(f"{alias} cannot be null.")

        return data

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.changes():
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict:
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
        }

    def apply_to(self, record, now: Optional[dt.datetime] = None):
        for name, value in self.changes().items():
            setattr(record, name, value)
        record.updated_at = now or dt.datetime.now(dt.timezone.utc)
        return record
