"""Text normalization helpers used by the extraction adapters."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_TITLE_SPLIT_RE = re.compile(r"[._\-]+")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def title_from_name(name: str) -> str | None:
    """Derive a display title from a file name, e.g. ``my-book_v2.pdf`` -> ``My Book V2``."""

    stem = name.rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if "." in stem:
        stem = stem.split(".", 1)[0]
    cleaned = normalize_whitespace(_TITLE_SPLIT_RE.sub(" ", stem))
    return cleaned.title() or None


def first_non_empty(*values: str | None) -> str | None:
    for value in values:
        if value is None:
            continue
        cleaned = normalize_whitespace(value)
        if cleaned:
            return cleaned
    return None
