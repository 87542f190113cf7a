from __future__ import annotations

import pytest

from docindex.errors import FieldCoercionError
from docindex.extraction.models import ExtractionResult
from docindex.records.builder import build_record
from docindex.records.models import Field
from docindex.records.schema import Schema
from docindex.records.types import FieldType


def _schema() -> Schema:
    return Schema("contents").declare_field("pages", FieldType.INTEGER)


def test_build_types_content_and_declared_metadata() -> None:
    result = ExtractionResult(content="hello", properties={"pages": "3"})

    record = build_record(result, _schema(), include_content=True, include_metadata=True)

    assert record is not None
    assert list(record) == [
        Field("contents", "hello", FieldType.TEXT, tokenized=True),
        Field("pages", 3, FieldType.INTEGER),
    ]


def test_build_propagates_coercion_errors() -> None:
    result = ExtractionResult(content="hello", properties={"pages": "three"})

    with pytest.raises(FieldCoercionError) as excinfo:
        build_record(result, _schema())

    assert excinfo.value.field_name == "pages"
    assert excinfo.value.value == "three"


def test_build_keeps_undeclared_properties_as_text_in_extractor_order() -> None:
    result = ExtractionResult(content=None, properties={"author": "Jane", "pages": "10", "title": "T"})

    record = build_record(result, _schema())

    assert record is not None
    assert record.names() == ["author", "pages", "title"]
    assert record.get("author") == Field("author", "Jane", FieldType.TEXT)


@pytest.mark.parametrize(
    ("include_content", "include_metadata"),
    [(True, True), (True, False), (False, True), (False, False)],
)
def test_build_returns_none_for_missing_result_regardless_of_flags(
    include_content: bool, include_metadata: bool
) -> None:
    record = build_record(None, _schema(), include_content=include_content, include_metadata=include_metadata)

    assert record is None


def test_content_only_build_skips_properties() -> None:
    result = ExtractionResult(content="body", properties={"pages": "not-a-number"})

    record = build_record(result, _schema(), include_content=True, include_metadata=False)

    assert record is not None
    assert record.names() == ["contents"]


def test_metadata_only_build_skips_present_body() -> None:
    result = ExtractionResult(content="body", properties={"pages": "4"})

    record = build_record(result, _schema(), include_content=False, include_metadata=True)

    assert record is not None
    assert record.names() == ["pages"]


def test_empty_result_yields_empty_but_present_record() -> None:
    record = build_record(ExtractionResult(), _schema(), include_content=True, include_metadata=False)

    assert record is not None
    assert len(record) == 0


def test_redeclaration_applies_to_later_builds() -> None:
    schema = _schema()
    result = ExtractionResult(properties={"pages": "3"})

    first = build_record(result, schema)
    schema.declare_field("pages", FieldType.TEXT)
    second = build_record(result, schema)

    assert first is not None and second is not None
    assert first.get("pages") == Field("pages", 3, FieldType.INTEGER)
    assert second.get("pages") == Field("pages", "3", FieldType.TEXT)


def test_property_sharing_the_content_name_does_not_shadow_the_body() -> None:
    result = ExtractionResult(content="BODY", properties={"title": "T", "author": "A"})

    record = build_record(result, Schema("title"))

    assert record is not None
    assert record.names() == ["title", "author"]
    assert record.to_dict()["title"]["value"] == "BODY"


def test_metadata_only_build_drops_property_named_like_content() -> None:
    result = ExtractionResult(content="BODY", properties={"contents": "x", "pages": "2"})

    record = build_record(result, _schema(), include_content=False)

    assert record is not None
    assert record.names() == ["pages"]
