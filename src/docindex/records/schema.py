"""Field schema that decides how extracted properties are represented.

A schema is a caller-owned value: build it once per content category, then
share it. Declarations may be appended between extractions, but the schema
does no locking of its own, so concurrent writers must be serialized by the
caller.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from docindex.errors import ConfigurationError, FieldCoercionError
from docindex.records.coercion import parse_float32, parse_float64, parse_int32, parse_int64
from docindex.records.models import Field
from docindex.records.types import FieldType

DEFAULT_CONTENT_FIELD = "contents"

_NUMERIC_PARSERS: dict[FieldType, Callable[[str], int | float]] = {
    FieldType.DOUBLE: parse_float64,
    FieldType.FLOAT: parse_float32,
    FieldType.LONG: parse_int64,
    FieldType.INTEGER: parse_int32,
}


class Schema:
    """Named, typed field declarations plus the reserved full-text field name."""

    def __init__(self, content_field_name: str = DEFAULT_CONTENT_FIELD) -> None:
        if not content_field_name or not content_field_name.strip():
            raise ConfigurationError("Content field name cannot be empty")
        self._content_field_name = content_field_name
        self._field_types: dict[str, FieldType] = {}

    def __repr__(self) -> str:
        declared = ", ".join(f"{name}={kind.value}" for name, kind in self._field_types.items())
        return f"Schema(content_field_name={self._content_field_name!r}, fields=[{declared}])"

    @property
    def content_field_name(self) -> str:
        return self._content_field_name

    @property
    def field_types(self) -> Mapping[str, FieldType]:
        """Read-only view of the declarations in insertion order."""

        return MappingProxyType(self._field_types)

    def declare_field(self, name: str, field_type: FieldType | str) -> "Schema":
        """Register or overwrite the type of *name*; returns the schema for chaining."""

        self._field_types[name] = FieldType.parse(field_type)
        return self

    def declare_fields(self, declarations: Mapping[str, FieldType | str]) -> "Schema":
        for name, field_type in declarations.items():
            self.declare_field(name, field_type)
        return self

    def type_of(self, name: str) -> FieldType:
        return self._field_types.get(name, FieldType.UNKNOWN)

    def make_content_field(self, body: str) -> Field:
        return Field(self._content_field_name, body, FieldType.TEXT, stored=True, tokenized=True)

    def make_field(self, name: str, raw_value: str) -> Field:
        """Build a typed field for one extracted property.

        Undeclared, text and date properties are stored verbatim as untokenized
        text. Numeric declarations are parsed strictly; an invalid literal
        raises :class:`FieldCoercionError`.
        """

        field_type = self.type_of(name)
        match field_type:
            case FieldType.DOUBLE | FieldType.FLOAT | FieldType.LONG | FieldType.INTEGER:
                parser = _NUMERIC_PARSERS[field_type]
                try:
                    value = parser(raw_value)
                except ValueError as exc:
                    raise FieldCoercionError(name, raw_value, field_type.value) from exc
                return Field(name, value, field_type)
            case FieldType.DATE | FieldType.TEXT | FieldType.UNKNOWN:
                return Field(name, raw_value, FieldType.TEXT)
