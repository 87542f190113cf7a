"""Semantic field types a schema can declare."""

from __future__ import annotations

from enum import Enum

from docindex.errors import ConfigurationError


class FieldType(str, Enum):
    """Declared semantic type of a record field."""

    TEXT = "text"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DATE = "date"
    UNKNOWN = "unknown"

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_TYPES

    @classmethod
    def parse(cls, value: "FieldType | str") -> "FieldType":
        """Resolve a FieldType from an enum member or its (case-insensitive) name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError(
            f"Unknown field type {value!r}. Expected one of {[member.value for member in cls]}"
        )


_NUMERIC_TYPES = frozenset({FieldType.INTEGER, FieldType.LONG, FieldType.FLOAT, FieldType.DOUBLE})
