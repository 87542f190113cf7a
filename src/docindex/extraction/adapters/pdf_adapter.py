"""PDF adapter producing page-ordered body text and document info properties."""

from __future__ import annotations

import pymupdf

from docindex.extraction.adapters.base import put_property
from docindex.extraction.detection import PDF, name_suffixes
from docindex.extraction.language_detection import detect_language
from docindex.extraction.models import ExtractionResult
from docindex.extraction.normalization import first_non_empty, normalize_whitespace, title_from_name

_PDF_MAGIC = b"%PDF-"

# pymupdf document info key -> property name
_INFO_PROPERTIES = (
    ("author", "author"),
    ("subject", "subject"),
    ("keywords", "keywords"),
    ("creator", "creator"),
    ("producer", "producer"),
    ("creationDate", "created"),
    ("modDate", "modified"),
)


class PDFAdapter:
    """Extract block-ordered page text and info dictionary entries from PDFs."""

    media_types = frozenset({PDF})

    def supports(self, name: str, sniffed_bytes: bytes | None = None) -> bool:
        suffixes = name_suffixes(name)
        if suffixes and suffixes[-1] == ".pdf":
            return True
        if sniffed_bytes is None:
            return False
        return sniffed_bytes.startswith(_PDF_MAGIC)

    def extract(self, payload: bytes, name: str, *, want_content: bool = True) -> ExtractionResult:
        with pymupdf.open(stream=payload, filetype="pdf") as doc:
            info = doc.metadata or {}
            content = self._extract_text(doc) if want_content else None
            page_count = doc.page_count

        properties: dict[str, str] = {"content_type": PDF}
        put_property(properties, "title", first_non_empty(info.get("title")) or title_from_name(name))
        for info_key, property_name in _INFO_PROPERTIES:
            put_property(properties, property_name, info.get(info_key))
        put_property(properties, "page_count", page_count)
        if content:
            # PDF info rarely carries a language tag; detect from text
            put_property(properties, "language", detect_language(content))

        return ExtractionResult(content=content, properties=properties)

    def _extract_text(self, doc: pymupdf.Document) -> str:
        pages: list[str] = []
        for page in doc:
            page_blocks = page.get_text("blocks")
            ordered_blocks = sorted(page_blocks, key=lambda row: (row[1], row[0], row[5]))
            # block_type 0 is text, 1 is an image placeholder
            texts = [normalize_whitespace(block[4]) for block in ordered_blocks if block[6] == 0]
            page_text = "\n".join(text for text in texts if text)
            if page_text:
                pages.append(page_text)
        return "\n\n".join(pages)
