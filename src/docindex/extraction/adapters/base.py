"""Shared adapter contract for per-format extraction parsers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from docindex.extraction.models import ExtractionResult


@runtime_checkable
class ExtractionAdapter(Protocol):
    """Protocol that every format adapter must implement."""

    media_types: frozenset[str]

    def supports(self, name: str, sniffed_bytes: bytes | None = None) -> bool:
        """Return True when this adapter can parse the named payload."""

    def extract(self, payload: bytes, name: str, *, want_content: bool = True) -> ExtractionResult:
        """Parse *payload* into body text (when wanted) and flat string properties."""


def put_property(properties: dict[str, str], key: str, value: object | None) -> None:
    """Store *value* as a string property, skipping empty values."""

    if value is None:
        return
    text = str(value).strip()
    if text:
        properties[key] = text
