"""Typed fields and the ordered record handed to an indexing sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from docindex.records.types import FieldType

FieldValue = str | int | float


@dataclass(frozen=True, slots=True)
class Field:
    """One typed, stored entry of a record."""

    name: str
    value: FieldValue
    field_type: FieldType
    stored: bool = True
    tokenized: bool = False


@dataclass(slots=True)
class Record:
    """Ordered sequence of typed fields produced for one extraction."""

    fields: list[Field] = field(default_factory=list)

    def add(self, item: Field) -> None:
        self.fields.append(item)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def names(self) -> list[str]:
        return [item.name for item in self.fields]

    def get(self, name: str) -> Field | None:
        """Return the first field called *name*, if any."""

        for item in self.fields:
            if item.name == name:
                return item
        return None

    def as_triples(self) -> list[tuple[str, FieldValue, FieldType]]:
        return [(item.name, item.value, item.field_type) for item in self.fields]

    def to_dict(self) -> dict[str, dict[str, object]]:
        return {
            item.name: {
                "value": item.value,
                "type": item.field_type.value,
                "stored": item.stored,
                "tokenized": item.tokenized,
            }
            for item in self.fields
        }
