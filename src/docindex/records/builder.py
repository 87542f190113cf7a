"""Assemble typed records from extraction results."""

from __future__ import annotations

import logging

from docindex.extraction.models import ExtractionResult
from docindex.records.models import Record
from docindex.records.schema import Schema

logger = logging.getLogger(__name__)


def build_record(
    result: ExtractionResult | None,
    schema: Schema,
    *,
    include_content: bool = True,
    include_metadata: bool = True,
) -> Record | None:
    """Map one extraction result onto *schema*.

    Returns ``None`` only when *result* is ``None`` (the extractor refused or
    failed); otherwise a record is returned even if it holds no fields. The
    content field, when included, always comes first, and a property sharing
    the content field name is dropped. Coercion failures from
    :meth:`Schema.make_field` are not caught here.
    """

    if result is None:
        logger.debug("No extraction result; skipping record assembly")
        return None

    record = Record()
    if include_content and result.content is not None:
        record.add(schema.make_content_field(result.content))

    if include_metadata:
        for name, value in result.properties.items():
            if name == schema.content_field_name:
                logger.debug("Skipping property %r: name is reserved for content", name)
                continue
            record.add(schema.make_field(name, value))

    logger.debug("Assembled record with %d fields: %s", len(record), record.names())
    return record
