"""TXT adapter with encoding detection and header-line properties."""

from __future__ import annotations

from charset_normalizer import from_bytes

from docindex.extraction.adapters.base import put_property
from docindex.extraction.detection import PLAIN_TEXT, name_suffixes
from docindex.extraction.models import ExtractionResult
from docindex.extraction.normalization import normalize_whitespace, title_from_name

_HEADER_FIELDS = {
    "title": "title",
    "author": "author",
    "название": "title",
    "автор": "author",
}
_HEADER_SCAN_LINES = 20
_BINARY_PREFIXES = (b"%PDF-", b"PK\x03\x04", b"<?xml", b"<FictionBook")


class TXTAdapter:
    """Extract plain-text documents with robust charset handling."""

    media_types = frozenset({PLAIN_TEXT})

    def supports(self, name: str, sniffed_bytes: bytes | None = None) -> bool:
        suffixes = name_suffixes(name)
        if suffixes and suffixes[-1] == ".txt":
            return True
        if sniffed_bytes is None:
            return False

        if suffixes and suffixes[-1] in {".pdf", ".epub", ".fb2", ".fbz", ".zip"}:
            return False

        prefix = sniffed_bytes.lstrip()
        if prefix.startswith(_BINARY_PREFIXES):
            return False

        return b"\x00" not in sniffed_bytes

    def extract(self, payload: bytes, name: str, *, want_content: bool = True) -> ExtractionResult:
        encoding = self._detect_encoding(payload)
        text = payload.decode(encoding)
        lines = text.splitlines()

        properties: dict[str, str] = {"content_type": PLAIN_TEXT, "encoding": encoding}
        headers = self._extract_headers(lines)
        put_property(properties, "title", headers.get("title") or title_from_name(name))
        put_property(properties, "author", headers.get("author"))
        put_property(properties, "line_count", len(lines))

        content = text if want_content else None
        return ExtractionResult(content=content, properties=properties)

    def _detect_encoding(self, raw: bytes) -> str:
        if not raw:
            return "utf-8"

        best = from_bytes(raw).best()
        if best and best.encoding:
            name = best.encoding.lower()
            if name in {"windows-1251", "cp1251"}:
                return "cp1251"
            return best.encoding

        for fallback in ("utf-8", "cp1251"):
            try:
                raw.decode(fallback)
                return fallback
            except UnicodeDecodeError:
                continue
        raise ValueError("Could not detect TXT encoding")

    def _extract_headers(self, lines: list[str]) -> dict[str, str]:
        headers: dict[str, str] = {}
        for line in lines[:_HEADER_SCAN_LINES]:
            normalized = normalize_whitespace(line)
            if not normalized or ":" not in normalized:
                continue
            key, value = normalized.split(":", 1)
            field = _HEADER_FIELDS.get(key.strip().casefold())
            clean_value = normalize_whitespace(value)
            if field and clean_value and field not in headers:
                headers[field] = clean_value
        return headers
