"""FB2 adapter with raw and zipped container support."""

from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

from lxml import etree

from docindex.extraction.adapters.base import put_property
from docindex.extraction.detection import FB2, ZIP, name_suffixes
from docindex.extraction.language_detection import detect_language, normalize_language_tag
from docindex.extraction.models import ExtractionResult
from docindex.extraction.normalization import normalize_whitespace, title_from_name

_ZIP_MAGIC = b"PK\x03\x04"
_TITLE_INFO = "//*[local-name()='description']/*[local-name()='title-info']"


class FB2Adapter:
    """Extract text and title-info properties from FictionBook sources."""

    media_types = frozenset({FB2, ZIP})

    def supports(self, name: str, sniffed_bytes: bytes | None = None) -> bool:
        suffixes = name_suffixes(name)
        if suffixes and suffixes[-1] in {".fb2", ".fbz"}:
            return True
        if suffixes[-2:] == [".fb2", ".zip"]:
            return True
        if sniffed_bytes is None:
            return False
        if sniffed_bytes.startswith(_ZIP_MAGIC):
            return bool(suffixes) and suffixes[-1] in {".zip", ".fbz"}
        return b"<FictionBook" in sniffed_bytes[:1024]

    def extract(self, payload: bytes, name: str, *, want_content: bool = True) -> ExtractionResult:
        xml_bytes = self._unwrap(payload)
        parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)
        root = etree.fromstring(xml_bytes, parser=parser)

        sections = root.xpath("//*[local-name()='body']//*[local-name()='section']")
        content = self._extract_text(root, sections) if want_content else None

        properties: dict[str, str] = {"content_type": FB2}
        title = self._first_text(root.xpath(f"{_TITLE_INFO}/*[local-name()='book-title']"))
        put_property(properties, "title", title or title_from_name(name))
        put_property(properties, "author", self._extract_author(root))

        language = normalize_language_tag(self._first_text(root.xpath(f"{_TITLE_INFO}/*[local-name()='lang']")))
        if language is None and content:
            language = detect_language(content)
        put_property(properties, "language", language)

        genre_nodes = root.xpath(f"{_TITLE_INFO}/*[local-name()='genre']")
        genres = [text for text in (self._first_text([node]) for node in genre_nodes) if text]
        put_property(properties, "genre", ", ".join(genres) if genres else None)
        put_property(properties, "created", self._extract_date(root))
        put_property(properties, "section_count", len(sections))

        return ExtractionResult(content=content, properties=properties)

    def _unwrap(self, payload: bytes) -> bytes:
        if not payload.startswith(_ZIP_MAGIC):
            return payload

        with ZipFile(BytesIO(payload), "r") as archive:
            candidates = [name for name in archive.namelist() if not name.endswith("/")]
            fb2_name = next((name for name in candidates if name.lower().endswith(".fb2")), None)
            target = fb2_name or (candidates[0] if candidates else None)
            if not target:
                raise ValueError("Zipped FB2 container has no readable files")
            return archive.read(target)

    def _extract_author(self, root: etree._Element) -> str | None:
        authors = root.xpath(f"{_TITLE_INFO}/*[local-name()='author']")
        names: list[str] = []
        for author in authors:
            first = self._first_text(author.xpath("./*[local-name()='first-name']"))
            middle = self._first_text(author.xpath("./*[local-name()='middle-name']"))
            last = self._first_text(author.xpath("./*[local-name()='last-name']"))
            full = normalize_whitespace(" ".join(part for part in [first, middle, last] if part))
            if full:
                names.append(full)
        return ", ".join(names) if names else None

    def _extract_date(self, root: etree._Element) -> str | None:
        nodes = root.xpath(f"{_TITLE_INFO}/*[local-name()='date']")
        for node in nodes:
            machine_value = node.get("value")
            if machine_value and machine_value.strip():
                return machine_value.strip()
        return self._first_text(nodes)

    def _extract_text(self, root: etree._Element, sections: list[etree._Element]) -> str:
        if not sections:
            bodies = root.xpath("//*[local-name()='body']") or [root]
            return normalize_whitespace(" ".join(bodies[0].itertext()))

        # Nested sections repeat their parent's text; keep leaf sections only.
        leaves = [section for section in sections if not section.xpath("./*[local-name()='section']")]
        texts = [normalize_whitespace(" ".join(section.itertext())) for section in leaves]
        return "\n\n".join(text for text in texts if text)

    def _first_text(self, nodes: list[object]) -> str | None:
        for node in nodes:
            if hasattr(node, "itertext"):
                text = normalize_whitespace(" ".join(node.itertext()))
            else:
                text = normalize_whitespace(str(node))
            if text:
                return text
        return None
