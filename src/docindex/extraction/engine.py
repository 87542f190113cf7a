"""Adapter routing, media type validation and failure absorption."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Mapping

from docindex.extraction.adapters import build_default_adapters, media_type_index
from docindex.extraction.adapters.base import ExtractionAdapter
from docindex.extraction.detection import detect_media_type
from docindex.extraction.models import ExtractionResult

logger = logging.getLogger(__name__)

Source = str | os.PathLike[str] | BinaryIO

DEFAULT_SNIFF_BYTES = 4096


class ContentExtractor:
    """Extract once, then report content and properties.

    Unsupported or unparsable input yields ``None`` rather than an exception.
    Only I/O faults (``OSError``) reach the caller. Streams passed in are read
    but left open; paths are opened and closed here.
    """

    def __init__(
        self,
        adapters: Mapping[str, ExtractionAdapter] | None = None,
        *,
        validate_media_type: bool = True,
        sniff_bytes: int = DEFAULT_SNIFF_BYTES,
    ) -> None:
        if sniff_bytes <= 0:
            raise ValueError("sniff_bytes must be positive")
        self._validate_media_type = validate_media_type
        self._sniff_bytes = sniff_bytes
        self._adapter_map: dict[str, ExtractionAdapter] = {}
        source = build_default_adapters() if adapters is None else adapters
        for name, adapter in source.items():
            self.register_adapter(name, adapter)

    @property
    def validate_media_type(self) -> bool:
        return self._validate_media_type

    @property
    def adapter_map(self) -> dict[str, ExtractionAdapter]:
        """Registered adapters keyed by adapter name."""

        return dict(self._adapter_map)

    @property
    def media_types(self) -> dict[str, list[str]]:
        """Media types accepted by the registered adapters, with the adapter names per type."""

        return media_type_index(self._adapter_map)

    def register_adapter(self, name: str, adapter: ExtractionAdapter) -> None:
        """Register an adapter implementation by key."""

        if not name:
            raise ValueError("Adapter name cannot be empty")
        self._adapter_map[name] = adapter

    def extract_all(
        self,
        source: Source,
        want_content: bool = True,
        *,
        name: str | None = None,
    ) -> ExtractionResult | None:
        """Parse *source*, returning ``None`` when it is unsupported or unparsable.

        *name* overrides the file name used for suffix-based routing, which is
        otherwise taken from the path or the stream's ``name`` attribute.
        """

        payload, source_name = self._read_source(source)
        if name is not None:
            source_name = name
        sniffed = payload[: self._sniff_bytes]

        selected = self._select_adapter(source_name, sniffed)
        if selected is None:
            logger.debug("No adapter supports %r", source_name)
            return None
        adapter_name, adapter = selected

        if self._validate_media_type:
            media_type = detect_media_type(sniffed, source_name)
            if media_type not in adapter.media_types:
                logger.debug(
                    "Media type %s of %r is not supported by adapter %s",
                    media_type,
                    source_name,
                    adapter_name,
                )
                return None

        try:
            result = adapter.extract(payload, source_name, want_content=want_content)
        except OSError:
            raise
        except Exception as exc:
            logger.warning("Adapter %s failed to parse %r: %s", adapter_name, source_name, exc)
            return None

        if not isinstance(result, ExtractionResult):
            logger.warning("Adapter %s returned non-canonical output for %r", adapter_name, source_name)
            return None
        return result

    def _select_adapter(self, name: str, sniffed: bytes) -> tuple[str, ExtractionAdapter] | None:
        for adapter_name, adapter in self._adapter_map.items():
            if adapter.supports(name, sniffed):
                return adapter_name, adapter
        return None

    def _read_source(self, source: Source) -> tuple[bytes, str]:
        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            return path.read_bytes(), path.name

        payload = source.read()
        stream_name = getattr(source, "name", None)
        if not isinstance(stream_name, str):
            stream_name = ""
        return payload, Path(stream_name).name if stream_name else ""
