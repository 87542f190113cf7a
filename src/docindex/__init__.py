"""Schema-directed typed records from extracted document content and metadata."""

__version__ = "0.1.0"

from docindex.config import ExtractorSettings
from docindex.errors import ConfigurationError, DocIndexError, FieldCoercionError
from docindex.extraction import ContentExtractor, ExtractionResult
from docindex.extractor import IndexContentExtractor
from docindex.records import DEFAULT_CONTENT_FIELD, Field, FieldType, Record, Schema, build_record

__all__ = [
    "ConfigurationError",
    "ContentExtractor",
    "DEFAULT_CONTENT_FIELD",
    "DocIndexError",
    "ExtractionResult",
    "ExtractorSettings",
    "Field",
    "FieldCoercionError",
    "FieldType",
    "IndexContentExtractor",
    "Record",
    "Schema",
    "build_record",
]
