"""Tests for archive extraction and the parse step."""
import io
import unittest
import zipfile

from docx_pack.model.document_model import Docx
from docx_pack.parser.docx_loader import DocxFile, load_docx
from docx_pack.utils.errors import (
    ArchiveError,
    InvalidArchiveError,
    PartNotFoundError,
    PartReadError,
    XmlStructureError,
)

WORD_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
  <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
  <Default Extension="xml" ContentType="application/xml"/>
</Types>"""

PACKAGE_RELS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" Target="word/document.xml"/>
</Relationships>"""

DOCUMENT_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:document xmlns:w="{WORD_NS}"><w:body><w:p><w:r><w:t>Hello</w:t></w:r></w:p></w:body></w:document>"""

STYLES_XML = f"""<w:styles xmlns:w="{WORD_NS}"><w:style w:type="paragraph" w:styleId="CORRUPTME"/></w:styles>"""


def build_archive(parts, compression=zipfile.ZIP_DEFLATED) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression) as archive:
        for name, data in parts.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def minimal_parts():
    return {
        "[Content_Types].xml": CONTENT_TYPES_XML,
        "_rels/.rels": PACKAGE_RELS_XML,
        "word/document.xml": DOCUMENT_XML,
    }


class DocxFileExtractionTest(unittest.TestCase):
    """Required parts must exist; optional parts may be absent."""

    def test_minimal_archive(self) -> None:
        docx_file = DocxFile.from_bytes(build_archive(minimal_parts()))
        self.assertEqual(docx_file.document, DOCUMENT_XML)
        self.assertIsNone(docx_file.styles)
        self.assertIsNone(docx_file.document_rels)
        self.assertEqual(
            sorted(docx_file.present_parts()),
            ["[Content_Types].xml", "_rels/.rels", "word/document.xml"],
        )
        self.assertIsNone(docx_file.raw_part("word/fontTable.xml"))

    def test_missing_required_part(self) -> None:
        parts = minimal_parts()
        del parts["word/document.xml"]
        with self.assertRaises(PartNotFoundError) as ctx:
            DocxFile.from_bytes(build_archive(parts))
        self.assertEqual(ctx.exception.path, "word/document.xml")
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertIsInstance(ctx.exception, ArchiveError)

    def test_not_a_zip(self) -> None:
        with self.assertRaises(InvalidArchiveError):
            DocxFile.from_bytes(b"definitely not a zip archive")

    def test_corrupt_optional_part_is_fatal(self) -> None:
        parts = minimal_parts()
        parts["word/styles.xml"] = STYLES_XML
        data = build_archive(parts, compression=zipfile.ZIP_STORED)
        corrupted = data.replace(b"CORRUPTME", b"XORRUPTME")
        with self.assertRaises(PartReadError) as ctx:
            DocxFile.from_bytes(corrupted)
        self.assertEqual(ctx.exception.path, "word/styles.xml")

    def test_undecodable_part_is_fatal(self) -> None:
        parts = minimal_parts()
        parts["docProps/app.xml"] = b"\xff\xfe\xfa"
        with self.assertRaises(PartReadError):
            DocxFile.from_bytes(build_archive(parts))

    def test_byte_order_mark_is_dropped(self) -> None:
        parts = minimal_parts()
        parts["word/document.xml"] = b"\xef\xbb\xbf" + DOCUMENT_XML.encode("utf-8")
        docx_file = DocxFile.from_bytes(build_archive(parts))
        self.assertEqual(docx_file.document, DOCUMENT_XML)


class DocxFileParseTest(unittest.TestCase):
    def test_parse_minimal(self) -> None:
        docx = DocxFile.from_bytes(build_archive(minimal_parts())).parse()
        self.assertIsInstance(docx, Docx)
        self.assertIsNone(docx.styles)
        self.assertIsNone(docx.app)
        self.assertEqual(docx.document.body.content[0].text, "Hello")
        self.assertEqual(len(docx.rels), 1)

    def test_parse_is_repeatable_and_independent(self) -> None:
        docx_file = DocxFile.from_bytes(build_archive(minimal_parts()))
        first = docx_file.parse()
        second = docx_file.parse()
        self.assertEqual(first, second)
        first.document.body.content.clear()
        self.assertEqual(len(second.document.body.content), 1)
        self.assertEqual(docx_file.parse(), second)

    def test_malformed_part_aborts_parse(self) -> None:
        parts = minimal_parts()
        parts["word/fontTable.xml"] = "<w:fonts"
        docx_file = DocxFile.from_bytes(build_archive(parts))
        with self.assertRaises(XmlStructureError) as ctx:
            docx_file.parse()
        self.assertEqual(ctx.exception.path, "word/fontTable.xml")

    def test_unreferenced_part_is_logged(self) -> None:
        parts = minimal_parts()
        parts["word/styles.xml"] = STYLES_XML
        docx_file = DocxFile.from_bytes(build_archive(parts))
        with self.assertLogs("docx_pack.parser.docx_loader", level="WARNING") as logs:
            docx = docx_file.parse()
        self.assertEqual(docx.missing_relationships(), ["styles"])
        self.assertIn("word/styles.xml", logs.output[0])

    def test_load_docx_accepts_stream(self) -> None:
        docx = load_docx(io.BytesIO(build_archive(minimal_parts())))
        self.assertEqual(docx.document.body.content[0].text, "Hello")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
