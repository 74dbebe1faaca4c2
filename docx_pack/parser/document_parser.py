"""Parse document.xml into structured content blocks."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_pack.model.elements import (
    Body,
    Break,
    Document,
    Paragraph,
    Run,
    Table,
    TableCell,
    TableRow,
    Text,
)
from docx_pack.parser.formatting_parser import FormattingParser, to_int
from docx_pack.utils.logger import get_logger
from docx_pack.utils.xml_utils import Namespaces, expect_root, local_name, qn

LOGGER = get_logger(__name__)

DOCUMENT_TAG = qn("w:document")


class DocumentParser:
    """Transforms Word body XML into model elements."""

    def __init__(self, document_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._document_xml = document_xml
        self._path = path
        self._formatting = FormattingParser()

    def parse(self) -> Document:
        """Parse the document body into block elements."""
        root = expect_root(self._document_xml, DOCUMENT_TAG, self._path)
        body_el = root.find("w:body", Namespaces.WORD)
        if body_el is None:
            LOGGER.warning("document.xml missing body element")
            return Document()

        body = Body()
        for child in list(body_el):
            tag = local_name(child.tag)
            if tag == "p":
                body.content.append(self._parse_paragraph(child))
            elif tag == "tbl":
                body.content.append(self._parse_table(child))
            elif tag == "sectPr":
                body.section_xml = ET.tostring(child, encoding="unicode").strip()
            else:
                LOGGER.debug("Skipping unsupported element: %s", tag)
        return Document(body=body)

    def _parse_paragraph(self, paragraph_el: ET.Element) -> Paragraph:
        runs: List[Run] = []
        for child in list(paragraph_el):
            tag = local_name(child.tag)
            if tag == "r":
                runs.append(self._parse_run(child))
            elif tag != "pPr":
                LOGGER.debug("Skipping paragraph child element: %s", tag)
        return Paragraph(
            runs=runs,
            property=self._formatting.paragraph(paragraph_el.find("w:pPr", Namespaces.WORD)),
        )

    def _parse_run(self, run_el: ET.Element) -> Run:
        run = Run(property=self._formatting.character(run_el.find("w:rPr", Namespaces.WORD)))
        for child in list(run_el):
            tag = local_name(child.tag)
            if tag == "t":
                preserve = child.get(qn("xml:space")) == "preserve"
                run.content.append(Text(child.text or "", preserve_space=preserve))
            elif tag == "br":
                run.content.append(Break(child.get(qn("w:type"))))
            elif tag != "rPr":
                LOGGER.debug("Skipping run child element: %s", tag)
        return run

    def _parse_table(self, table_el: ET.Element) -> Table:
        grid = [
            to_int(col.get(qn("w:w"))) or 0
            for col in table_el.findall("w:tblGrid/w:gridCol", Namespaces.WORD)
        ]
        rows: List[TableRow] = []
        for row_el in table_el.findall("w:tr", Namespaces.WORD):
            cells: List[TableCell] = []
            for cell_el in row_el.findall("w:tc", Namespaces.WORD):
                width_el = cell_el.find("w:tcPr/w:tcW", Namespaces.WORD)
                width = None if width_el is None else to_int(width_el.get(qn("w:w")))
                paragraphs = [self._parse_paragraph(p) for p in cell_el.findall("w:p", Namespaces.WORD)]
                cells.append(TableCell(content=paragraphs, width=width))
            rows.append(TableRow(cells=cells))
        return Table(
            rows=rows,
            property=self._formatting.table(table_el.find("w:tblPr", Namespaces.WORD)),
            grid=grid,
        )
