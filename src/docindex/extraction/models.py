"""Canonical output shared by all extraction adapters."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ExtractionResult:
    """Body text plus flattened metadata produced by one extraction.

    ``content`` is ``None`` when content was not requested or could not be
    extracted. ``properties`` keeps the adapter's emission order.
    """

    content: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
