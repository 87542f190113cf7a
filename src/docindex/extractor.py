"""Typed-record extractor facade over the extraction engine and record builder."""

from __future__ import annotations

from docindex.config import ExtractorSettings
from docindex.errors import ConfigurationError
from docindex.extraction.engine import ContentExtractor, Source
from docindex.records.builder import build_record
from docindex.records.models import Record
from docindex.records.schema import DEFAULT_CONTENT_FIELD, Schema


class IndexContentExtractor:
    """Extract content and metadata from documents as schema-typed records.

    Every call returns ``None`` when extraction is not possible or was
    unsuccessful (unsupported media type, parse failure). *name* gives an
    unnamed stream the file name used for format routing.
    """

    def __init__(
        self,
        engine: ContentExtractor | None = None,
        *,
        validate_media_type: bool | None = None,
        content_field_name: str = DEFAULT_CONTENT_FIELD,
    ) -> None:
        if engine is not None and validate_media_type is not None:
            raise ConfigurationError("validate_media_type applies only when no engine is given")
        if engine is None:
            engine = ContentExtractor(validate_media_type=validate_media_type is not False)
        self._engine = engine
        self._default_schema = Schema(content_field_name)

    @classmethod
    def from_settings(cls, settings: ExtractorSettings) -> "IndexContentExtractor":
        engine = ContentExtractor(
            validate_media_type=settings.validate_media_type,
            sniff_bytes=settings.sniff_bytes,
        )
        return cls(engine, content_field_name=settings.content_field_name)

    @property
    def default_schema(self) -> Schema:
        return self._default_schema

    @property
    def engine(self) -> ContentExtractor:
        return self._engine

    def extract(self, source: Source, schema: Schema | None = None, *, name: str | None = None) -> Record | None:
        """Extract content and metadata, typed by *schema* or the default schema."""

        return self._extract(source, schema, name, include_content=True, include_metadata=True)

    def extract_content(
        self, source: Source, schema: Schema | None = None, *, name: str | None = None
    ) -> Record | None:
        """Extract the body text only."""

        return self._extract(source, schema, name, include_content=True, include_metadata=False)

    def extract_metadata(
        self, source: Source, schema: Schema | None = None, *, name: str | None = None
    ) -> Record | None:
        """Extract metadata only; the engine skips body text assembly."""

        return self._extract(source, schema, name, include_content=False, include_metadata=True)

    def _extract(
        self,
        source: Source,
        schema: Schema | None,
        name: str | None,
        *,
        include_content: bool,
        include_metadata: bool,
    ) -> Record | None:
        result = self._engine.extract_all(source, want_content=include_content, name=name)
        return build_record(
            result,
            schema if schema is not None else self._default_schema,
            include_content=include_content,
            include_metadata=include_metadata,
        )
