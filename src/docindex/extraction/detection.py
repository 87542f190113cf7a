"""Media type sniffing from leading payload bytes and file names."""

from __future__ import annotations

PDF = "application/pdf"
EPUB = "application/epub+zip"
FB2 = "application/x-fictionbook+xml"
ZIP = "application/zip"
PLAIN_TEXT = "text/plain"

_PDF_MAGIC = b"%PDF-"
_ZIP_MAGIC = b"PK\x03\x04"
# OCF requires an uncompressed "mimetype" entry as the first archive member.
_EPUB_MIMETYPE_ENTRY = b"mimetypeapplication/epub+zip"
_FB2_MARKER = b"<FictionBook"
_XML_PROLOG = b"<?xml"

_SUFFIX_TYPES: dict[str, str] = {
    ".pdf": PDF,
    ".epub": EPUB,
    ".fb2": FB2,
    ".fbz": ZIP,
    ".zip": ZIP,
    ".txt": PLAIN_TEXT,
}


def _strip_bom(sniffed: bytes) -> bytes:
    for bom in (b"\xef\xbb\xbf", b"\xff\xfe", b"\xfe\xff"):
        if sniffed.startswith(bom):
            return sniffed[len(bom):]
    return sniffed


def name_suffixes(name: str | None) -> list[str]:
    """Lower-cased suffixes of a file name, e.g. ``book.fb2.zip`` -> ``[".fb2", ".zip"]``."""

    if not name:
        return []
    base = name.replace("\\", "/").rsplit("/", 1)[-1]
    parts = base.split(".")[1:]
    return [f".{part.lower()}" for part in parts if part]


def detect_media_type(sniffed: bytes, name: str | None = None) -> str | None:
    """Return the media type implied by *sniffed* bytes, falling back to *name*.

    Magic bytes win over the file name. Payloads that match no known signature
    or suffix are reported as plain text when they contain no NUL bytes.
    """

    head = _strip_bom(sniffed).lstrip()
    if sniffed.startswith(_PDF_MAGIC):
        return PDF
    if sniffed.startswith(_ZIP_MAGIC):
        if _EPUB_MIMETYPE_ENTRY in sniffed[:128]:
            return EPUB
        return ZIP
    if head.startswith(_FB2_MARKER) or (head.startswith(_XML_PROLOG) and _FB2_MARKER in head):
        return FB2

    suffixes = name_suffixes(name)
    if suffixes and suffixes[-1] in _SUFFIX_TYPES:
        return _SUFFIX_TYPES[suffixes[-1]]

    if sniffed and b"\x00" not in sniffed:
        return PLAIN_TEXT
    return None
