"""Emit ``w:rPr``, ``w:pPr`` and ``w:tblPr`` elements from property values."""
from __future__ import annotations

from typing import Dict, Optional
from xml.etree import ElementTree as ET

from docx_pack.model.formatting import CharacterProperty, ParagraphProperty, TableProperty
from docx_pack.utils.xml_utils import qn


def w_attrs(values: Dict[str, object]) -> Dict[str, str]:
    """Qualify ``w:`` attribute names and drop unset values."""
    return {qn(name): str(value) for name, value in values.items() if value is not None}


class FormattingWriter:
    """Mirror of the formatting parser; child order follows the schema sequence."""

    def character(self, parent: ET.Element, prop: Optional[CharacterProperty]) -> None:
        if prop is None:
            return
        rpr = ET.SubElement(parent, qn("w:rPr"))
        self._val(rpr, "w:rStyle", prop.style_id)
        if prop.fonts is not None:
            ET.SubElement(
                rpr,
                qn("w:rFonts"),
                w_attrs(
                    {
                        "w:ascii": prop.fonts.ascii,
                        "w:hAnsi": prop.fonts.h_ansi,
                        "w:eastAsia": prop.fonts.east_asia,
                        "w:cs": prop.fonts.cs,
                    }
                ),
            )
        self._toggle(rpr, "w:b", prop.bold)
        self._toggle(rpr, "w:i", prop.italics)
        self._toggle(rpr, "w:strike", prop.strike)
        self._toggle(rpr, "w:dstrike", prop.double_strike)
        self._val(rpr, "w:color", prop.color)
        self._val(rpr, "w:sz", prop.size)
        self._val(rpr, "w:highlight", prop.highlight)
        self._val(rpr, "w:u", prop.underline)
        self._val(rpr, "w:lang", prop.lang)

    def paragraph(self, parent: ET.Element, prop: Optional[ParagraphProperty]) -> None:
        if prop is None:
            return
        ppr = ET.SubElement(parent, qn("w:pPr"))
        self._val(ppr, "w:pStyle", prop.style_id)
        self._toggle(ppr, "w:keepNext", prop.keep_next)
        self._toggle(ppr, "w:widowControl", prop.widow_control)
        if prop.numbering is not None:
            num_pr = ET.SubElement(ppr, qn("w:numPr"))
            self._val(num_pr, "w:ilvl", prop.numbering.level)
            self._val(num_pr, "w:numId", prop.numbering.num_id)
        if prop.spacing is not None:
            spacing = prop.spacing
            ET.SubElement(
                ppr,
                qn("w:spacing"),
                w_attrs(
                    {
                        "w:before": spacing.before,
                        "w:after": spacing.after,
                        "w:line": spacing.line,
                        "w:lineRule": spacing.line_rule,
                    }
                ),
            )
        if prop.indent is not None:
            indent = prop.indent
            ET.SubElement(
                ppr,
                qn("w:ind"),
                w_attrs(
                    {
                        "w:left": indent.left,
                        "w:right": indent.right,
                        "w:firstLine": indent.first_line,
                        "w:hanging": indent.hanging,
                    }
                ),
            )
        self._val(ppr, "w:jc", prop.justification)
        self._val(ppr, "w:outlineLvl", prop.outline_level)

    def table(self, parent: ET.Element, prop: Optional[TableProperty]) -> None:
        if prop is None:
            return
        tbl_pr = ET.SubElement(parent, qn("w:tblPr"))
        self._val(tbl_pr, "w:tblStyle", prop.style_id)
        if prop.width is not None or prop.width_type is not None:
            ET.SubElement(tbl_pr, qn("w:tblW"), w_attrs({"w:w": prop.width, "w:type": prop.width_type}))
        self._val(tbl_pr, "w:jc", prop.justification)

    @staticmethod
    def _val(parent: ET.Element, tag: str, value: object) -> None:
        if value is not None:
            ET.SubElement(parent, qn(tag), {qn("w:val"): str(value)})

    @staticmethod
    def _toggle(parent: ET.Element, tag: str, value: Optional[bool]) -> None:
        if value is None:
            return
        element = ET.SubElement(parent, qn(tag))
        if not value:
            element.set(qn("w:val"), "false")
