"""Serialize the main document part."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.elements import Break, Document, Paragraph, Run, Table, Text
from docx_pack.utils.errors import SerializationError
from docx_pack.utils.xml_utils import qn, to_xml_bytes
from docx_pack.writer.formatting_writer import FormattingWriter


class DocumentWriter:
    """Produce ``w:document`` from a :class:`Document`."""

    def __init__(self, document: Document) -> None:
        self._document = document
        self._formatting = FormattingWriter()

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element(qn("w:document"))
        body_el = ET.SubElement(root, qn("w:body"))
        body = self._document.body
        for block in body.content:
            if isinstance(block, Paragraph):
                self._write_paragraph(body_el, block)
            elif isinstance(block, Table):
                self._write_table(body_el, block)
            else:
                raise SerializationError(f"Unsupported body content: {type(block).__name__}")
        if body.section_xml:
            body_el.append(ET.fromstring(body.section_xml))
        return root

    def _write_paragraph(self, parent: ET.Element, paragraph: Paragraph) -> None:
        p_el = ET.SubElement(parent, qn("w:p"))
        self._formatting.paragraph(p_el, paragraph.property)
        for run in paragraph.runs:
            self._write_run(p_el, run)

    def _write_run(self, parent: ET.Element, run: Run) -> None:
        r_el = ET.SubElement(parent, qn("w:r"))
        self._formatting.character(r_el, run.property)
        for item in run.content:
            if isinstance(item, Text):
                t_el = ET.SubElement(r_el, qn("w:t"))
                if item.preserve_space:
                    t_el.set(qn("xml:space"), "preserve")
                t_el.text = item.text
            elif isinstance(item, Break):
                br_el = ET.SubElement(r_el, qn("w:br"))
                if item.break_type:
                    br_el.set(qn("w:type"), item.break_type)
            else:
                raise SerializationError(f"Unsupported run content: {type(item).__name__}")

    def _write_table(self, parent: ET.Element, table: Table) -> None:
        tbl_el = ET.SubElement(parent, qn("w:tbl"))
        self._formatting.table(tbl_el, table.property)
        if table.grid:
            grid_el = ET.SubElement(tbl_el, qn("w:tblGrid"))
            for width in table.grid:
                ET.SubElement(grid_el, qn("w:gridCol"), {qn("w:w"): str(width)})
        for row in table.rows:
            tr_el = ET.SubElement(tbl_el, qn("w:tr"))
            for cell in row.cells:
                tc_el = ET.SubElement(tr_el, qn("w:tc"))
                if cell.width is not None:
                    tc_pr = ET.SubElement(tc_el, qn("w:tcPr"))
                    ET.SubElement(tc_pr, qn("w:tcW"), {qn("w:w"): str(cell.width), qn("w:type"): "dxa"})
                paragraphs = cell.content or [Paragraph()]
                for paragraph in paragraphs:
                    self._write_paragraph(tc_el, paragraph)
