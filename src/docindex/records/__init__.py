"""Schema-directed mapping of extraction output onto typed records."""

from .builder import build_record
from .models import Field, Record
from .schema import DEFAULT_CONTENT_FIELD, Schema
from .types import FieldType

__all__ = ["DEFAULT_CONTENT_FIELD", "Field", "FieldType", "Record", "Schema", "build_record"]
