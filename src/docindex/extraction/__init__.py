"""Extraction engine: format adapters behind one extract-once call."""

from .engine import ContentExtractor
from .models import ExtractionResult

__all__ = ["ContentExtractor", "ExtractionResult"]
