from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

from docindex.extraction.adapters.fb2_adapter import FB2Adapter

_FB2 = """<?xml version="1.0" encoding="utf-8"?>
<FictionBook xmlns="http://www.gribuser.ru/xml/fictionbook/2.0">
  <description>
    <title-info>
      <genre>sf</genre>
      <genre>adventure</genre>
      <author><first-name>Иван</first-name><last-name>Петров</last-name></author>
      <book-title>Северное сияние</book-title>
      <date value="2019-05-01">май 2019</date>
      <lang>ru</lang>
    </title-info>
  </description>
  <body>
    <section><title><p>Один</p></title><p>Первая глава начинается здесь.</p></section>
    <section><title><p>Два</p></title><p>Вторая глава завершает историю.</p></section>
  </body>
</FictionBook>
""".encode("utf-8")


def _zipped(payload: bytes) -> bytes:
    buffer = BytesIO()
    with ZipFile(buffer, "w") as archive:
        archive.writestr("book.fb2", payload)
    return buffer.getvalue()


def test_fb2_adapter_extracts_title_info_and_sections() -> None:
    adapter = FB2Adapter()

    result = adapter.extract(_FB2, "book.fb2")

    assert adapter.supports("book.fb2")
    assert adapter.supports("unnamed", _FB2[:512])
    assert result.properties == {
        "content_type": "application/x-fictionbook+xml",
        "title": "Северное сияние",
        "author": "Иван Петров",
        "language": "ru",
        "genre": "sf, adventure",
        "created": "2019-05-01",
        "section_count": "2",
    }
    assert result.content is not None
    assert result.content.index("Первая глава") < result.content.index("Вторая глава")


def test_fb2_adapter_unwraps_zipped_payload() -> None:
    adapter = FB2Adapter()
    payload = _zipped(_FB2)

    result = adapter.extract(payload, "book.fb2.zip", want_content=False)

    assert adapter.supports("book.fb2.zip", payload[:64])
    assert result.content is None
    assert result.properties["title"] == "Северное сияние"
