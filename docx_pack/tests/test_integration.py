"""
Integration tests for the write -> extract -> parse pipeline.

Every aggregate is written into an in-memory archive and read back.
"""
import io
import tempfile
import unittest
from pathlib import Path

from docx_pack.model.document_model import Docx
from docx_pack.model.elements import Paragraph, Run, Table, TableCell, TableRow
from docx_pack.model.formatting import CharacterProperty, Fonts, ParagraphProperty, TableProperty
from docx_pack.model.properties_model import App, Core
from docx_pack.model.style_model import DocDefaults, LatentStyle, LatentStyles, Style
from docx_pack.parser.docx_loader import DocxFile, load_docx
from docx_pack.parts import SCHEMA_FONT_TABLE, SCHEMA_STYLES


def round_trip(docx: Docx) -> Docx:
    buffer = io.BytesIO()
    docx.write(buffer)
    buffer.seek(0)
    return DocxFile.from_reader(buffer).parse()


def build_full_docx() -> Docx:
    docx = Docx(
        app=App(application="docx-pack", app_version="1.0", pages="1", company="Example Co"),
        core=Core(
            title="Quarterly report",
            creator="Author Name",
            revision="2",
            created="2024-01-02T03:04:05Z",
            modified="2024-01-03T00:00:00Z",
        ),
    )
    docx.insert_para(
        Paragraph(property=ParagraphProperty(style_id="Heading1")).push_text("Summary")
    )
    body = Paragraph()
    body.push_run(Run(property=CharacterProperty(bold=True, fonts=Fonts(ascii="Arial"))).push_text("Bold "))
    body.push_text("and plain.")
    docx.insert_para(body)
    docx.insert_table(
        Table(
            rows=[
                TableRow(cells=[TableCell(content=[Paragraph().push_text("a")]), TableCell(content=[Paragraph().push_text("b")])])
            ],
            property=TableProperty(style_id="TableGrid"),
            grid=[4000, 4000],
        )
    )

    normal = docx.create_style()
    normal.style_id = "Normal"
    normal.name = "Normal"
    normal.is_default = True
    normal.q_format = True
    docx.insert_style(
        Style(
            style_id="Heading1",
            name="heading 1",
            based_on="Normal",
            ui_priority=9,
            character=CharacterProperty(size=32, color="2F5496"),
        )
    )
    assert docx.styles is not None
    docx.styles.doc_defaults = DocDefaults(character=CharacterProperty(lang="en-US"))
    docx.styles.latent_styles = LatentStyles(def_ui_priority=99, exceptions=[LatentStyle(name="Normal", q_format=1)])

    arial = docx.create_font("Arial")
    arial.family = "swiss"
    arial.pitch = "variable"
    docx.create_font("Times New Roman").charset = "00"
    return docx


class RoundTripTest(unittest.TestCase):
    """parse(extract(write(A))) reproduces A."""

    def test_full_aggregate_round_trips(self) -> None:
        original = build_full_docx()
        parsed = round_trip(original)

        self.assertEqual(parsed.document, original.document)
        self.assertEqual(parsed.styles, original.styles)
        self.assertEqual(parsed.font_table, original.font_table)
        self.assertEqual(parsed.app, original.app)
        self.assertEqual(parsed.core, original.core)
        self.assertEqual(parsed.content_types, original.content_types)
        self.assertEqual(parsed.rels, original.rels)
        self.assertEqual(parsed.document_rels, original.document_rels)
        self.assertEqual(parsed, original)
        self.assertEqual(parsed.missing_relationships(), [])

    def test_empty_aggregate_round_trips(self) -> None:
        original = Docx()
        parsed = round_trip(original)
        self.assertEqual(parsed.document.body.content, [])
        self.assertIsNone(parsed.document_rels)
        self.assertIsNone(parsed.styles)
        self.assertEqual(parsed, original)

    def test_escaped_text_survives(self) -> None:
        text = 'Hello, "World" & <Friends>'
        parsed = round_trip(Docx().insert_para(Paragraph().push_text(text)))
        self.assertEqual(parsed.document.body.content[0].text, text)

    def test_property_text_is_kept_verbatim(self) -> None:
        original = Docx(
            app=App(company="", template="  Normal.dotm  "),
            core=Core(title="", subject="  padded  ", keywords="\ttabbed"),
        )
        parsed = round_trip(original)
        self.assertEqual(parsed.core, Core(title="", subject="  padded  ", keywords="\ttabbed"))
        self.assertEqual(parsed.app, App(company="", template="  Normal.dotm  "))

    def test_carriage_return_survives(self) -> None:
        original = Docx(core=Core(description="one\r\ntwo"))
        original.insert_para(Paragraph().push_text("line\rnext"))
        parsed = round_trip(original)
        self.assertEqual(parsed.document.body.content[0].text, "line\rnext")
        assert parsed.core is not None
        self.assertEqual(parsed.core.description, "one\r\ntwo")

    def test_empty_cell_reads_back_with_one_paragraph(self) -> None:
        table = Table(rows=[TableRow(cells=[TableCell(), TableCell(content=[Paragraph().push_text("x")])])])
        parsed = round_trip(Docx().insert_table(table))
        cells = parsed.document.body.content[0].rows[0].cells
        self.assertEqual(cells[0].content, [Paragraph()])
        self.assertEqual(cells[1].content, [Paragraph().push_text("x")])

    def test_created_style_survives_with_part_level_relationship(self) -> None:
        docx = Docx()
        style = docx.create_style()
        style.style_id = "Quote"
        style.name = "Quote"
        style.character = CharacterProperty(italics=True)

        parsed = round_trip(docx)

        self.assertIsNotNone(parsed.document_rels)
        assert parsed.document_rels is not None
        self.assertEqual(len(parsed.document_rels), 1)
        rel = list(parsed.document_rels)[0]
        self.assertEqual(rel.rel_type, SCHEMA_STYLES)
        self.assertEqual(rel.target, "styles.xml")
        assert parsed.styles is not None
        self.assertEqual(parsed.styles.get("Quote"), style)
        self.assertEqual(parsed.rels.by_type(SCHEMA_STYLES), [])

    def test_rewrite_of_parsed_package_after_reset(self) -> None:
        parsed = round_trip(build_full_docx())
        parsed.reset_relationships()
        again = round_trip(parsed)
        assert again.document_rels is not None
        self.assertEqual([rel.rel_type for rel in again.document_rels], [SCHEMA_STYLES, SCHEMA_FONT_TABLE])
        self.assertEqual(len(again.rels), 3)

    def test_into_owned_detaches(self) -> None:
        parsed = round_trip(build_full_docx())
        owned = parsed.into_owned()
        self.assertEqual(owned, parsed)
        owned.document.body.content.clear()
        assert owned.styles is not None
        owned.styles.styles.clear()
        self.assertEqual(len(parsed.document.body.content), 3)
        assert parsed.styles is not None
        self.assertEqual(len(parsed.styles.styles), 2)

    def test_file_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "report.docx"
            original = build_full_docx()
            original.write_file(target)
            self.assertEqual(load_docx(target), original)
            self.assertEqual(load_docx(str(target)), original)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
