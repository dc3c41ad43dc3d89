"""Tests for the form manager."""

import pytest

from form_store.defaults import ONBOARDING_FORM
from form_store.exceptions import RecordNotFoundError, RecordValidationError
from form_store.manager import FormManager
from form_store.models import FormSchema, RecordQuery, SortOrder, ValidationMode
from form_store.store import RecordStore


@pytest.fixture
def schema() -> FormSchema:
    return FormSchema.model_validate(ONBOARDING_FORM)


@pytest.fixture
def manager(schema) -> FormManager:
    return FormManager(schema)


@pytest.fixture
def valid_data() -> dict:
    return {
        "fullName": "Jane Doe",
        "age": 30,
        "department": "engineering",
        "skills": ["python"],
        "dateOfBirth": "1994-05-17",
        "remoteWork": False,
    }


def test_create_record(manager, valid_data):
    record = manager.create_record(valid_data)
    assert record.data == valid_data
    assert manager.get_record(record.id) == record


def test_create_record_invalid(manager, valid_data):
    with pytest.raises(RecordValidationError) as exc:
        manager.create_record(dict(valid_data, age=15, skills=[]))
    assert exc.value.errors == {"age": "Min value is 18", "skills": "Required"}
    assert len(manager.store) == 0


def test_validation_mode_is_applied(schema, valid_data):
    manager = FormManager(schema, validation_mode=ValidationMode.ALL)
    with pytest.raises(RecordValidationError) as exc:
        manager.create_record(dict(valid_data, fullName="x" * 60))
    assert exc.value.errors == {"fullName": "Max length is 50"}


def test_reject_unknown_fields(schema, valid_data):
    manager = FormManager(schema, reject_unknown_fields=True)
    with pytest.raises(RecordValidationError) as exc:
        manager.create_record(dict(valid_data, salary=1))
    assert exc.value.errors == {"salary": "Unknown field"}


def test_list_records(manager, valid_data):
    first = manager.create_record(dict(valid_data, fullName="Alice"))
    second = manager.create_record(dict(valid_data, fullName="Bob"))
    result = manager.list_records(RecordQuery(sort_by="fullName", sort_order=SortOrder.DESC))
    assert [record.id for record in result.data] == [second.id, first.id]
    assert manager.list_records(RecordQuery(search="alice")).meta.total == 1


def test_get_record_missing(manager):
    with pytest.raises(RecordNotFoundError) as exc:
        manager.get_record("missing")
    assert exc.value.record_id == "missing"


def test_update_record_merges_without_validation(manager, valid_data):
    """Test updates are written as given when re-validation is off."""
    record = manager.create_record(valid_data)
    updated = manager.update_record(record.id, {"age": 5, "bio": "Hello"})
    assert updated.data == dict(valid_data, age=5, bio="Hello")


def test_update_record_revalidates_merged_data(schema, valid_data):
    manager = FormManager(schema, revalidate_on_update=True)
    record = manager.create_record(valid_data)
    with pytest.raises(RecordValidationError) as exc:
        manager.update_record(record.id, {"age": 5})
    assert exc.value.errors == {"age": "Min value is 18"}
    assert manager.get_record(record.id).data == valid_data

    updated = manager.update_record(record.id, {"age": 40})
    assert updated.data["age"] == 40


def test_update_record_missing(manager):
    with pytest.raises(RecordNotFoundError):
        manager.update_record("missing", {"age": 30})


def test_update_record_missing_with_revalidation(schema):
    manager = FormManager(schema, revalidate_on_update=True)
    with pytest.raises(RecordNotFoundError):
        manager.update_record("missing", {"age": 30})


def test_delete_record(manager, valid_data):
    record = manager.create_record(valid_data)
    manager.delete_record(record.id)
    with pytest.raises(RecordNotFoundError):
        manager.get_record(record.id)


def test_delete_record_missing(manager):
    """Test deleting an unknown id is reported, not silently accepted."""
    with pytest.raises(RecordNotFoundError):
        manager.delete_record("missing")


def test_managers_do_not_share_records(schema, valid_data):
    first = FormManager(schema)
    second = FormManager(schema)
    first.create_record(valid_data)
    assert len(first.store) == 1
    assert len(second.store) == 0


def test_manager_uses_given_store(schema, valid_data):
    store = RecordStore()
    manager = FormManager(schema, store=store)
    manager.create_record(valid_data)
    assert len(store) == 1
