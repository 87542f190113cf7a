"""Format adapters registered with the extraction engine by default."""

from __future__ import annotations

from .base import ExtractionAdapter
from .epub_adapter import EPUBAdapter
from .fb2_adapter import FB2Adapter
from .pdf_adapter import PDFAdapter
from .txt_adapter import TXTAdapter

# Selection order matters: plain text accepts almost any NUL-free payload.
_DEFAULT_ADAPTERS: tuple[tuple[str, type[ExtractionAdapter]], ...] = (
    ("pdf", PDFAdapter),
    ("epub", EPUBAdapter),
    ("fb2", FB2Adapter),
    ("txt", TXTAdapter),
)


def build_default_adapters() -> dict[str, ExtractionAdapter]:
    """Return a fresh default adapter map, in selection order."""

    return {name: adapter_cls() for name, adapter_cls in _DEFAULT_ADAPTERS}


def media_type_index(adapters: dict[str, ExtractionAdapter]) -> dict[str, list[str]]:
    """Map each media type to the names of the adapters that accept it."""

    index: dict[str, list[str]] = {}
    for name, adapter in adapters.items():
        for media_type in sorted(adapter.media_types):
            index.setdefault(media_type, []).append(name)
    return index


__all__ = [
    "EPUBAdapter",
    "ExtractionAdapter",
    "FB2Adapter",
    "PDFAdapter",
    "TXTAdapter",
    "build_default_adapters",
    "media_type_index",
]
