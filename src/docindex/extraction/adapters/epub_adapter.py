"""EPUB adapter reading spine-ordered chapter text and Dublin Core properties."""

from __future__ import annotations

import os
import tempfile

import ebooklib
from bs4 import BeautifulSoup
from ebooklib import epub

from docindex.extraction.adapters.base import put_property
from docindex.extraction.detection import EPUB, name_suffixes
from docindex.extraction.language_detection import detect_language, normalize_language_tag
from docindex.extraction.models import ExtractionResult
from docindex.extraction.normalization import first_non_empty, normalize_whitespace, title_from_name

_ZIP_MAGIC = b"PK\x03\x04"

# Dublin Core element -> property name
_DC_PROPERTIES = (
    ("publisher", "publisher"),
    ("date", "created"),
    ("identifier", "identifier"),
)


def _first_dc(book: epub.EpubBook, element: str) -> str | None:
    values = book.get_metadata("DC", element) or []
    return first_non_empty(*(value for value, _attrs in values))


def _all_dc(book: epub.EpubBook, element: str) -> list[str]:
    values = book.get_metadata("DC", element) or []
    return [cleaned for cleaned in (first_non_empty(value) for value, _attrs in values) if cleaned]


def _item_text(xhtml: bytes) -> str:
    soup = BeautifulSoup(xhtml, "xml")
    body = soup.body or soup

    parts: list[str] = []
    for node in body.find_all(["h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "blockquote"]):
        text = normalize_whitespace(node.get_text(" ", strip=True))
        if text:
            parts.append(text)

    if parts:
        return "\n".join(parts)
    return normalize_whitespace(body.get_text(" ", strip=True))


def _read_book(payload: bytes) -> epub.EpubBook:
    # ebooklib resolves its source as a filesystem path, so spool the payload.
    handle, spool_path = tempfile.mkstemp(suffix=".epub")
    try:
        with os.fdopen(handle, "wb") as spool:
            spool.write(payload)
        return epub.read_epub(spool_path)
    finally:
        os.unlink(spool_path)


class EPUBAdapter:
    """Extract text from EPUB document items in spine order."""

    media_types = frozenset({EPUB})

    def supports(self, name: str, sniffed_bytes: bytes | None = None) -> bool:
        suffixes = name_suffixes(name)
        if suffixes and suffixes[-1] == ".epub":
            return True
        if sniffed_bytes is None:
            return False
        return sniffed_bytes.startswith(_ZIP_MAGIC) and b"epub" in sniffed_bytes[:128]

    def extract(self, payload: bytes, name: str, *, want_content: bool = True) -> ExtractionResult:
        book = _read_book(payload)
        documents = self._spine_documents(book)
        content = self._extract_text(documents) if want_content else None

        properties: dict[str, str] = {"content_type": EPUB}
        put_property(properties, "title", _first_dc(book, "title") or title_from_name(name))
        authors = _all_dc(book, "creator")
        put_property(properties, "author", ", ".join(authors) if authors else None)

        language = normalize_language_tag(_first_dc(book, "language"))
        if language is None and content:
            language = detect_language(content)
        put_property(properties, "language", language)

        for element, property_name in _DC_PROPERTIES:
            put_property(properties, property_name, _first_dc(book, element))
        put_property(properties, "chapter_count", len(documents))

        return ExtractionResult(content=content, properties=properties)

    def _spine_documents(self, book: epub.EpubBook) -> list[epub.EpubItem]:
        documents: list[epub.EpubItem] = []
        for spine_entry in book.spine:
            item_id = spine_entry[0] if isinstance(spine_entry, tuple) else spine_entry
            item = book.get_item_with_id(item_id)
            if item is None or item.get_type() != ebooklib.ITEM_DOCUMENT or isinstance(item, epub.EpubNav):
                continue
            documents.append(item)
        return documents

    def _extract_text(self, documents: list[epub.EpubItem]) -> str:
        chapters = [_item_text(item.get_content()) for item in documents]
        return "\n\n".join(chapter for chapter in chapters if chapter)
