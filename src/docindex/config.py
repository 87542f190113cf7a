"""Runtime configuration for the extractor facade."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from docindex.errors import ConfigurationError
from docindex.extraction.engine import DEFAULT_SNIFF_BYTES
from docindex.records.schema import DEFAULT_CONTENT_FIELD

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class ExtractorSettings:
    """Validated settings used to construct an extractor."""

    content_field_name: str = DEFAULT_CONTENT_FIELD
    validate_media_type: bool = True
    sniff_bytes: int = DEFAULT_SNIFF_BYTES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractorSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        content_field_name = source.get("DOCINDEX_CONTENT_FIELD", DEFAULT_CONTENT_FIELD).strip()
        raw_validate = source.get("DOCINDEX_VALIDATE_MEDIA_TYPE", "true").strip().lower()
        raw_sniff = source.get("DOCINDEX_SNIFF_BYTES", str(DEFAULT_SNIFF_BYTES)).strip()

        invalid: list[str] = []
        if not content_field_name:
            invalid.append("DOCINDEX_CONTENT_FIELD")

        validate_media_type = raw_validate in _TRUE_VALUES
        if raw_validate not in _TRUE_VALUES | _FALSE_VALUES:
            invalid.append("DOCINDEX_VALIDATE_MEDIA_TYPE")

        try:
            sniff_bytes = int(raw_sniff)
        except ValueError:
            sniff_bytes = 0
        if sniff_bytes <= 0:
            invalid.append("DOCINDEX_SNIFF_BYTES")

        if invalid:
            invalid_text = ", ".join(invalid)
            raise ConfigurationError(f"Invalid docindex environment variables: {invalid_text}")

        return cls(
            content_field_name=content_field_name,
            validate_media_type=validate_media_type,
            sniff_bytes=sniff_bytes,
        )
