"""Domain errors raised by schema configuration and record assembly."""

from __future__ import annotations

from dataclasses import dataclass


class DocIndexError(Exception):
    """Base class for docindex failures."""


@dataclass(slots=True)
class ConfigurationError(DocIndexError):
    """Invalid schema or extractor settings."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class FieldCoercionError(DocIndexError):
    """A raw property value is not a valid literal for its declared numeric type."""

    field_name: str
    value: str
    field_type: str

    def __str__(self) -> str:
        return f"Cannot coerce field {self.field_name!r} value {self.value!r} to {self.field_type}"
