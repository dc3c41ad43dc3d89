"""Tests for the form store models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from form_store.defaults import ONBOARDING_FORM
from form_store.exceptions import InvalidFormSchemaError
from form_store.models import FieldOption, FieldType, FormField, FormSchema, Record, RecordQuery, SortOrder, ValidationRules
from form_store.models.record import format_timestamp


def test_schema_from_document():
    """Test building a schema from its JSON document."""
    schema = FormSchema.model_validate(ONBOARDING_FORM)
    assert schema.title == "Employee Onboarding"
    assert len(schema) == 7
    assert schema.get_field_ids() == ["fullName", "age", "department", "skills", "dateOfBirth", "bio", "remoteWork"]
    assert schema.get_field("skills").type == FieldType.MULTI_SELECT
    assert schema.get_field("fullName").rules.min_length == 2
    assert schema.get_field("dateOfBirth").rules.min_date == "1900-01-01"


def test_schema_document_round_trip():
    """Test a loaded schema renders back as the same document."""
    assert FormSchema.model_validate(ONBOARDING_FORM).to_document() == ONBOARDING_FORM


def test_schema_duplicate_field_ids():
    """Test that schema creation fails with duplicate field ids."""
    with pytest.raises(InvalidFormSchemaError) as exc:
        FormSchema(
            title="t",
            fields=[
                FormField(id="name", type=FieldType.TEXT, label="First name"),
                FormField(id="name", type=FieldType.TEXT, label="Last name"),
            ],
        )
    assert "Duplicate field ids in schema: name" in str(exc.value)


@pytest.mark.parametrize("field_type", [FieldType.SELECT, FieldType.MULTI_SELECT])
@pytest.mark.parametrize("options", [None, []])
def test_option_fields_require_options(field_type, options):
    """Test select fields without options are rejected."""
    with pytest.raises(InvalidFormSchemaError) as exc:
        FormField(id="choice", type=field_type, label="Choice", options=options)
    assert "Options not provided" in str(exc.value)


def test_invalid_field_type():
    """Test that an unknown field type is rejected."""
    with pytest.raises(ValidationError) as exc:
        FormField(id="rating", type="stars", label="Rating")
    assert "multi-select" in str(exc.value)


def test_invalid_pattern():
    with pytest.raises(InvalidFormSchemaError) as exc:
        ValidationRules(pattern="([a-z")
    assert "Invalid validation pattern" in str(exc.value)


def test_invalid_min_date():
    with pytest.raises(InvalidFormSchemaError):
        ValidationRules(min_date="first of January")


def test_validation_rules_aliases():
    """Test rules accept both wire names and Python names."""
    by_alias = ValidationRules.model_validate({"minLength": 2, "maxSelected": 3, "minDate": "2000-01-01"})
    by_name = ValidationRules(min_length=2, max_selected=3, min_date="2000-01-01")
    assert by_alias == by_name
    assert not by_alias.required


def test_field_without_validation_has_empty_rules():
    field = FormField(id="remote", type=FieldType.SWITCH, label="Remote")
    assert field.rules == ValidationRules()
    assert field.required is False


def test_schema_lookup():
    schema = FormSchema(
        title="t",
        fields=[FormField(id="team", type=FieldType.SELECT, label="Team", options=[FieldOption(label="A", value="a")])],
    )
    assert schema.has_field("team")
    assert not schema.has_field("missing")
    assert schema[0].id == "team"
    assert [field.id for field in schema] == ["team"]
    with pytest.raises(KeyError):
        schema.get_field("missing")


def test_schema_is_immutable_throughout():
    """Test the schema, its fields and their rules reject changes."""
    schema = FormSchema.model_validate(ONBOARDING_FORM)
    field = schema.get_field("age")
    with pytest.raises(ValidationError):
        schema.title = "Renamed"
    with pytest.raises(ValidationError):
        field.label = "Years"
    with pytest.raises(ValidationError):
        field.rules.max = 10
    with pytest.raises(ValidationError):
        schema.get_field("department").options[0].value = "sales"
    with pytest.raises(AttributeError):
        schema.fields.append(field)
    with pytest.raises(TypeError):
        schema.get_field("skills").options[0] = field


def test_record_document_uses_wire_names():
    record = Record(id="abc", created_at="2024-01-01T00:00:00.000Z", data={"age": 30})
    assert record.to_document() == {"id": "abc", "createdAt": "2024-01-01T00:00:00.000Z", "data": {"age": 30}}


def test_record_defaults():
    """Test records get a generated id and timestamp."""
    first, second = Record(), Record()
    assert first.id != second.id
    assert first.created_at.endswith("Z")


def test_format_timestamp():
    moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "2024-05-06T07:08:09.123Z"


def test_record_query_defaults():
    query = RecordQuery()
    assert (query.page, query.limit, query.sort_by, query.sort_order, query.search) == (1, 10, "createdAt", SortOrder.DESC, "")


@pytest.mark.parametrize(
    "page,limit,expected",
    [
        (None, None, (1, 10)),
        ("2", "25", (2, 25)),
        (3, 5, (3, 5)),
        ("abc", "xyz", (1, 10)),
        ("0", "0", (1, 10)),
        ("-2", "-5", (1, 10)),
        ("4abc", "7.9", (4, 7)),
        (True, False, (1, 10)),
    ],
)
def test_record_query_from_params_normalizes_paging(page, limit, expected):
    """Test malformed paging parameters fall back to defaults."""
    query = RecordQuery.from_params(page=page, limit=limit)
    assert (query.page, query.limit) == expected


@pytest.mark.parametrize("raw,expected", [("asc", SortOrder.ASC), ("ASC", SortOrder.ASC), ("desc", SortOrder.DESC), ("sideways", SortOrder.DESC), (None, SortOrder.DESC)])
def test_record_query_from_params_sort_order(raw, expected):
    assert RecordQuery.from_params(sort_order=raw).sort_order == expected


def test_record_query_from_params_defaults_empty_values():
    query = RecordQuery.from_params(sort_by="", search=None)
    assert query.sort_by == "createdAt"
    assert query.search == ""


def test_record_query_rejects_non_positive_values():
    with pytest.raises(ValidationError):
        RecordQuery(page=0)
