"""Language detection fallback for containers that carry no language tag."""

from __future__ import annotations

from functools import lru_cache

# Map common container language tags to ISO 639-1 codes
_LANGUAGE_TAGS: dict[str, str] = {
    "en": "en", "eng": "en", "english": "en",
    "de": "de", "deu": "de", "ger": "de", "german": "de",
    "fr": "fr", "fra": "fr", "fre": "fr", "french": "fr",
    "es": "es", "spa": "es", "spanish": "es",
    "it": "it", "ita": "it", "italian": "it",
    "ru": "ru", "rus": "ru", "russian": "ru",
    "kk": "kk", "kaz": "kk", "kazakh": "kk",
    "tt": "tt", "tat": "tt", "tatar": "tt",
}
_MIN_SAMPLE_CHARS = 20


def normalize_language_tag(raw: str | None) -> str | None:
    """Map a raw tag such as ``en-US`` or ``rus`` to an ISO 639-1 code, or return None."""

    if not raw:
        return None
    primary = raw.strip().lower().replace("_", "-").split("-", 1)[0]
    return _LANGUAGE_TAGS.get(primary)


@lru_cache(maxsize=1)
def _get_detector():
    from lingua import Language, LanguageDetectorBuilder

    return (
        LanguageDetectorBuilder.from_languages(
            Language.ENGLISH,
            Language.GERMAN,
            Language.FRENCH,
            Language.SPANISH,
            Language.ITALIAN,
            Language.RUSSIAN,
            Language.KAZAKH,
        )
        .with_minimum_relative_distance(0.1)
        .build()
    )


def detect_language(text: str, *, sample_chars: int = 3000) -> str | None:
    """Return the ISO 639-1 code detected for *text*, or None when inconclusive.

    Only the first *sample_chars* characters are inspected. Samples shorter
    than a sentence fragment are not classified.
    """
    sample = text[:sample_chars].strip()
    if len(sample) < _MIN_SAMPLE_CHARS:
        return None

    result = _get_detector().detect_language_of(sample)
    if result is None:
        return None
    return result.iso_code_639_1.name.lower()
