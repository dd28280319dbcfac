"""Unit tests for source converters."""

import asyncio
import io

import pytest

from docfill.core.exceptions import ParseError, UnsupportedContentError
from docfill.interfaces.converter import SourceKind, infer_source_kind
from docfill.strategies.converters import DocxConverter, HtmlConverter, PlainTextConverter


def _docx_bytes(build) -> bytes:
    from docx import Document

    doc = Document()
    build(doc)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


# =============================================================================
# Source Kind Tests
# =============================================================================


class TestInferSourceKind:
    """Test suite for upload kind inference."""

    @pytest.mark.parametrize(
        ("filename", "kind"),
        [
            ("lease.docx", SourceKind.WORD),
            ("LEASE.DOCX", SourceKind.WORD),
            ("notes.txt", SourceKind.TEXT),
            ("page.html", SourceKind.MARKUP),
            ("page.htm", SourceKind.MARKUP),
        ],
    )
    def test_by_extension(self, filename, kind):
        assert infer_source_kind(filename) == kind

    def test_media_type_wins(self):
        assert infer_source_kind("upload.bin", "text/html; charset=utf-8") == SourceKind.MARKUP

    def test_unknown_media_type_falls_back_to_extension(self):
        assert infer_source_kind("notes.txt", "application/octet-stream") == SourceKind.TEXT

    @pytest.mark.parametrize("filename", ["legacy.doc", "letter.rtf", "README"])
    def test_unsupported(self, filename):
        with pytest.raises(UnsupportedContentError):
            infer_source_kind(filename)


# =============================================================================
# Plain Text Converter Tests
# =============================================================================


class TestPlainTextConverter:
    """Test suite for PlainTextConverter."""

    @pytest.fixture
    def converter(self):
        return PlainTextConverter()

    def test_kind(self, converter):
        assert converter.kind == SourceKind.TEXT

    def test_paragraphs_and_breaks(self, converter):
        async def run_test():
            return await converter.convert(b"Line one\nLine two\n\nSecond")

        markup = asyncio.run(run_test())
        assert markup == "<p>Line one<br>Line two</p><p>Second</p>"

    def test_markup_characters_are_escaped(self, converter):
        assert converter.text_to_markup("a < b & c") == "<p>a &lt; b &amp; c</p>"

    def test_windows_newlines(self, converter):
        assert converter.text_to_markup("a\r\n\r\nb") == "<p>a</p><p>b</p>"

    def test_invalid_encoding(self, converter):
        async def run_test():
            with pytest.raises(ParseError):
                await converter.convert(b"\xff\xfe\xfa")

        asyncio.run(run_test())


class TestHtmlConverter:
    """Test suite for HtmlConverter."""

    def test_passthrough(self):
        converter = HtmlConverter()

        async def run_test():
            return await converter.convert(b"<p>Hello <b>there</b></p>")

        assert asyncio.run(run_test()) == "<p>Hello <b>there</b></p>"
        assert converter.kind == SourceKind.MARKUP


# =============================================================================
# Word Converter Tests
# =============================================================================


class TestDocxConverter:
    """Test suite for DocxConverter."""

    @pytest.fixture
    def converter(self):
        return DocxConverter()

    def test_paragraphs_and_headings(self, converter):
        def build(doc):
            doc.add_heading("Lease", level=0)
            doc.add_heading("Parties", level=2)
            doc.add_paragraph("Landlord: .......")
            doc.add_paragraph("")

        async def run_test():
            return await converter.convert(_docx_bytes(build))

        markup = asyncio.run(run_test())
        assert "<h1>Lease</h1>" in markup
        assert "<h2>Parties</h2>" in markup
        assert "<p>Landlord: .......</p>" in markup
        assert markup.endswith("<p></p>")

    def test_table_cells_follow_document_order(self, converter):
        def build(doc):
            doc.add_paragraph("Before")
            table = doc.add_table(rows=1, cols=2)
            table.cell(0, 0).text = "Left"
            table.cell(0, 1).text = "Right"
            doc.add_paragraph("After")

        async def run_test():
            return await converter.convert(_docx_bytes(build))

        markup = asyncio.run(run_test())
        assert markup.index("Before") < markup.index("<p>Left</p>")
        assert markup.index("<p>Left</p>") < markup.index("<p>Right</p>")
        assert markup.index("<p>Right</p>") < markup.index("After")

    def test_text_is_escaped(self, converter):
        async def run_test():
            return await converter.convert(_docx_bytes(lambda d: d.add_paragraph("A & <B>")))

        assert "<p>A &amp; &lt;B&gt;</p>" in asyncio.run(run_test())

    def test_not_a_word_document(self, converter):
        async def run_test():
            with pytest.raises(ParseError):
                await converter.convert(b"definitely not a zip file")

        asyncio.run(run_test())
