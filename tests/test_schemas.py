import datetime as dt
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from affirmations.schemas.affirmation import AffirmationCreate, AffirmationPatch
from affirmations.schemas.collection import CollectionCreate, CollectionOut, CollectionPatch
from affirmations.utils.types import TimeOfDay


def test_collection_create_requires_non_empty_name():
    with pytest.raises(ValidationError):
        CollectionCreate(name="")

    collection = CollectionCreate(name="Morning")
    assert collection.is_default is False
    assert collection.description is None


def test_collection_create_accepts_camel_case_fields():
    collection = CollectionCreate.model_validate({"name": "Work", "isDefault": True, "icon": "💼"})

    assert collection.is_default is True
    assert collection.icon == "💼"


def test_collection_patch_requires_at_least_one_field():
    with pytest.raises(ValidationError, match="At least one field must be provided to update."):
        CollectionPatch.model_validate({})


def test_collection_patch_rejects_explicit_null():
    with pytest.raises(ValidationError, match="description cannot be null."):
        CollectionPatch.model_validate({"description": None})


def test_collection_patch_rejects_null_by_field_name():
    with pytest.raises(ValidationError, match="isDefault cannot be null."):
        CollectionPatch(name="Evening", is_default=None)


def test_collection_patch_rejects_empty_name():
    with pytest.raises(ValidationError):
        CollectionPatch.model_validate({"name": ""})


def test_collection_patch_changes_only_supplied_fields():
    patch = CollectionPatch.model_validate({"icon": "☀️", "isDefault": False})

    assert patch.changes() == {"icon": "☀️", "is_default": False}


def test_patch_apply_to_overlays_and_refreshes_updated_at():
    created = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
    now = dt.datetime(2024, 1, 2, tzinfo=dt.timezone.utc)
    record = SimpleNamespace(
        name="Morning", description="Start the day", icon=None, is_default=False,
        created_at=created, updated_at=created,
    )

    CollectionPatch(name="Evening").apply_to(record, now)

    assert record.name == "Evening"
    assert record.description == "Start the day"
    assert record.created_at == created
    assert record.updated_at == now


def test_affirmation_create_rejects_unknown_time_of_day():
    with pytest.raises(ValidationError):
        AffirmationCreate.model_validate({"text": "I am calm", "useTimeOfDay": "noon"})


def test_affirmation_create_defaults():
    affirmation = AffirmationCreate.model_validate({"text": "I am calm", "useTimeOfDay": "evening"})

    assert affirmation.use_time_of_day is TimeOfDay.EVENING
    assert affirmation.is_favorite is False
    assert affirmation.collection_id is None


def test_affirmation_create_treats_blank_collection_as_none():
    assert AffirmationCreate(text="I am calm", collection_id="").collection_id is None


def test_affirmation_patch_counts_explicit_null_collection():
    patch = AffirmationPatch.model_validate({"collectionId": None})

    assert patch.changes() == {"collection_id": None}


def test_affirmation_patch_omitted_collection_is_not_a_change():
    patch = AffirmationPatch.model_validate({"isFavorite": True})

    assert "collection_id" not in patch.changes()


def test_affirmation_patch_requires_at_least_one_field():
    with pytest.raises(ValidationError, match="At least one field"):
        AffirmationPatch.model_validate({})


def test_affirmation_patch_rejects_null_next_to_other_fields():
    with pytest.raises(ValidationError, match="category cannot be null."):
        AffirmationPatch.model_validate({"text": "I rest", "category": None})


def test_record_out_serializes_camel_case():
    now = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
    record = SimpleNamespace(
        id="c1", user_id="u1", name="Morning", description=None, icon=None,
        is_default=True, created_at=now, updated_at=now,
    )

    dumped = CollectionOut.model_validate(record).model_dump(by_alias=True)

    assert dumped["userId"] == "u1"
    assert dumped["isDefault"] is True
    assert dumped["createdAt"] == now
    assert dumped["description"] is None
