from __future__ import annotations

import math

import numpy as np
import pytest

from docindex.errors import ConfigurationError, FieldCoercionError
from docindex.records.models import Field
from docindex.records.schema import DEFAULT_CONTENT_FIELD, Schema
from docindex.records.types import FieldType


def test_default_content_field_name_is_contents() -> None:
    assert Schema().content_field_name == DEFAULT_CONTENT_FIELD == "contents"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_content_field_name_is_rejected(name: str) -> None:
    with pytest.raises(ConfigurationError):
        Schema(name)


def test_declare_field_chains_and_preserves_declaration_order() -> None:
    schema = Schema().declare_field("pages", FieldType.INTEGER).declare_field("created", "date")

    assert list(schema.field_types) == ["pages", "created"]
    assert schema.type_of("created") is FieldType.DATE
    assert schema.type_of("missing") is FieldType.UNKNOWN


def test_redeclaring_a_field_keeps_the_last_type() -> None:
    schema = Schema().declare_field("size", FieldType.INTEGER).declare_field("author", FieldType.TEXT)
    schema.declare_field("size", FieldType.DOUBLE)

    assert schema.type_of("size") is FieldType.DOUBLE
    assert list(schema.field_types) == ["size", "author"]
    assert schema.make_field("size", "2.5") == Field("size", 2.5, FieldType.DOUBLE)


def test_declare_fields_accepts_mapping() -> None:
    schema = Schema().declare_fields({"a": "long", "b": FieldType.FLOAT})

    assert dict(schema.field_types) == {"a": FieldType.LONG, "b": FieldType.FLOAT}


def test_field_types_view_is_read_only() -> None:
    schema = Schema().declare_field("pages", FieldType.INTEGER)

    with pytest.raises(TypeError):
        schema.field_types["pages"] = FieldType.TEXT  # type: ignore[index]


def test_unknown_type_name_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        Schema().declare_field("pages", "short")


def test_content_field_is_stored_tokenized_text() -> None:
    field = Schema("body").make_content_field("hello world")

    assert field == Field("body", "hello world", FieldType.TEXT, stored=True, tokenized=True)


def test_undeclared_field_is_verbatim_untokenized_text() -> None:
    field = Schema().make_field("author", "  Jane  ")

    assert field.field_type is FieldType.TEXT
    assert field.value == "  Jane  "
    assert field.stored is True
    assert field.tokenized is False


def test_unknown_declared_type_behaves_like_undeclared() -> None:
    field = Schema().declare_field("misc", FieldType.UNKNOWN).make_field("misc", "42")

    assert field == Field("misc", "42", FieldType.TEXT)


def test_date_field_is_stored_unchanged() -> None:
    schema = Schema().declare_field("created", FieldType.DATE)

    field = schema.make_field("created", "2020-01-01T00:00:00Z")

    assert field == Field("created", "2020-01-01T00:00:00Z", FieldType.TEXT)


def test_numeric_fields_round_trip() -> None:
    schema = Schema().declare_fields(
        {
            "pages": FieldType.INTEGER,
            "bytes": FieldType.LONG,
            "ratio": FieldType.FLOAT,
            "score": FieldType.DOUBLE,
        }
    )

    pages = schema.make_field("pages", "-2147483648")
    size = schema.make_field("bytes", "9223372036854775807")
    ratio = schema.make_field("ratio", "0.1")
    score = schema.make_field("score", "1.0E-3")

    assert (pages.field_type, pages.value) == (FieldType.INTEGER, -2147483648)
    assert (size.field_type, size.value) == (FieldType.LONG, 9223372036854775807)
    assert ratio.field_type is FieldType.FLOAT
    assert np.float32(ratio.value) == np.float32("0.1")
    assert (score.field_type, score.value) == (FieldType.DOUBLE, 0.001)


def test_integer_coercion_error_names_field_and_value() -> None:
    schema = Schema().declare_field("pages", FieldType.INTEGER)

    with pytest.raises(FieldCoercionError) as excinfo:
        schema.make_field("pages", "three")

    assert excinfo.value.field_name == "pages"
    assert excinfo.value.value == "three"
    assert "pages" in str(excinfo.value)
    assert "three" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_integer_out_of_32_bit_range_is_rejected() -> None:
    schema = Schema().declare_field("pages", FieldType.INTEGER)

    with pytest.raises(FieldCoercionError):
        schema.make_field("pages", "2147483648")


def test_double_special_values() -> None:
    schema = Schema().declare_field("score", FieldType.DOUBLE)

    assert math.isnan(schema.make_field("score", "NaN").value)
    assert schema.make_field("score", "-Infinity").value == -math.inf
