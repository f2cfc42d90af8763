"""Unit tests for document validation at the ingestion boundary."""

import json

import pytest

from self_map.errors import DanglingReferenceError, DuplicateLabelError, SelfMapValidationError
from self_map.models import Association, Entry
from self_map.validation import (
    find_dangling_associations,
    load_document,
    loads_document,
    parse_document,
)


@pytest.mark.unit
def test_parse_valid_document(sample_document):
    data = parse_document(sample_document)
    assert data.labels() == ["Mentor", "Marathon", "Layoff", "Chess"]
    assert data.entries[0] == Entry("Mentor", "People", 0.8, 0.7)
    assert data.associations[1] == Association("Layoff", "Marathon", "threatens", 0.4)


@pytest.mark.unit
@pytest.mark.parametrize("payload", [
    {"entries": []},
    {"associations": []},
    {},
])
def test_missing_top_level_fields_are_rejected(payload):
    with pytest.raises(SelfMapValidationError, match="missing fields"):
        parse_document(payload)


@pytest.mark.unit
def test_non_array_fields_are_rejected():
    with pytest.raises(SelfMapValidationError, match="'entries' must be an array"):
        parse_document({"entries": {"label": "A"}, "associations": []})


@pytest.mark.unit
def test_non_object_document_is_rejected():
    with pytest.raises(SelfMapValidationError):
        parse_document([1, 2, 3])


@pytest.mark.unit
def test_malformed_entry_is_rejected(sample_document):
    sample_document["entries"][2]["power"] = "high"
    with pytest.raises(SelfMapValidationError, match=r"entries\[2\]\.power"):
        parse_document(sample_document)


@pytest.mark.unit
def test_boolean_is_not_a_number(sample_document):
    sample_document["entries"][0]["valence"] = True
    with pytest.raises(SelfMapValidationError):
        parse_document(sample_document)


@pytest.mark.unit
def test_duplicate_labels_are_rejected(sample_document):
    sample_document["entries"].append(
        {"label": "Chess", "category": "Other", "power": 0.1, "valence": 0.1}
    )
    with pytest.raises(DuplicateLabelError) as excinfo:
        parse_document(sample_document)
    assert excinfo.value.labels == ["Chess"]


@pytest.mark.unit
def test_dangling_reference_lenient_keeps_document(sample_document):
    sample_document["associations"].append({"src": "Mentor", "dst": "Nobody", "relation": "affirms", "weight": 1})
    data = parse_document(sample_document)
    assert len(data.associations) == 4
    assert find_dangling_associations(data.entries, data.associations) == [
        Association("Mentor", "Nobody", "affirms", 1.0)
    ]


@pytest.mark.unit
def test_dangling_reference_strict_rejects_document(sample_document):
    sample_document["associations"].append({"src": "Nobody", "dst": "Mentor", "relation": "affirms", "weight": 1})
    with pytest.raises(DanglingReferenceError) as excinfo:
        parse_document(sample_document, dangling_policy="strict")
    assert excinfo.value.references == [("Nobody", "Mentor")]


@pytest.mark.unit
def test_unknown_policy_is_a_programming_error(sample_document):
    with pytest.raises(ValueError, match="dangling policy"):
        parse_document(sample_document, dangling_policy="sometimes")


@pytest.mark.unit
def test_association_defaults(sample_document):
    sample_document["associations"] = [{"src": "Mentor", "dst": "Chess"}]
    data = parse_document(sample_document)
    assert data.associations[0] == Association("Mentor", "Chess", "associates_with", 1.0)


@pytest.mark.unit
def test_unknown_category_is_kept(sample_document):
    sample_document["entries"][0]["category"] = "Mentors"
    assert parse_document(sample_document).entries[0].category == "Mentors"


@pytest.mark.unit
def test_loads_document_rejects_invalid_json():
    with pytest.raises(SelfMapValidationError, match="Failed to parse JSON"):
        loads_document('{"entries": [')


@pytest.mark.unit
def test_load_document_from_file(tmp_path, sample_document):
    path = tmp_path / "self_map.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    data = load_document(path)
    assert len(data.entries) == 4


@pytest.mark.unit
def test_load_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.json")


@pytest.mark.unit
def test_round_trip_through_to_dict(sample_data):
    assert parse_document(sample_data.to_dict()) == sample_data
