"""Read run, paragraph and table properties shared by document.xml and styles.xml."""
from __future__ import annotations

from typing import Optional
from xml.etree import ElementTree as ET

from docx_pack.model.formatting import (
    CharacterProperty,
    Fonts,
    Indent,
    NumberingProperty,
    ParagraphProperty,
    Spacing,
    TableProperty,
)
from docx_pack.utils.xml_utils import Namespaces, qn

_FALSE_VALUES = {"0", "false", "off"}


def to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class FormattingParser:
    """Convert ``w:rPr``, ``w:pPr`` and ``w:tblPr`` elements into property values."""

    def character(self, rpr: Optional[ET.Element]) -> Optional[CharacterProperty]:
        if rpr is None:
            return None
        fonts = None
        fonts_el = rpr.find("w:rFonts", Namespaces.WORD)
        if fonts_el is not None:
            fonts = Fonts(
                ascii=fonts_el.get(qn("w:ascii")),
                h_ansi=fonts_el.get(qn("w:hAnsi")),
                east_asia=fonts_el.get(qn("w:eastAsia")),
                cs=fonts_el.get(qn("w:cs")),
            )
        return CharacterProperty(
            style_id=self._val(rpr, "w:rStyle"),
            fonts=fonts,
            bold=self._toggle(rpr, "w:b"),
            italics=self._toggle(rpr, "w:i"),
            strike=self._toggle(rpr, "w:strike"),
            double_strike=self._toggle(rpr, "w:dstrike"),
            color=self._val(rpr, "w:color"),
            size=self._int_val(rpr, "w:sz"),
            highlight=self._val(rpr, "w:highlight"),
            underline=self._val(rpr, "w:u"),
            lang=self._val(rpr, "w:lang"),
        )

    def paragraph(self, ppr: Optional[ET.Element]) -> Optional[ParagraphProperty]:
        if ppr is None:
            return None
        numbering = None
        num_pr = ppr.find("w:numPr", Namespaces.WORD)
        if num_pr is not None:
            num_id = self._int_val(num_pr, "w:numId")
            if num_id is not None:
                numbering = NumberingProperty(num_id=num_id, level=self._int_val(num_pr, "w:ilvl") or 0)
        spacing = None
        spacing_el = ppr.find("w:spacing", Namespaces.WORD)
        if spacing_el is not None:
            spacing = Spacing(
                before=self._int_attr(spacing_el, "w:before"),
                after=self._int_attr(spacing_el, "w:after"),
                line=self._int_attr(spacing_el, "w:line"),
                line_rule=spacing_el.get(qn("w:lineRule")),
            )
        indent = None
        ind_el = ppr.find("w:ind", Namespaces.WORD)
        if ind_el is not None:
            indent = Indent(
                left=self._int_attr(ind_el, "w:left"),
                right=self._int_attr(ind_el, "w:right"),
                first_line=self._int_attr(ind_el, "w:firstLine"),
                hanging=self._int_attr(ind_el, "w:hanging"),
            )
        return ParagraphProperty(
            style_id=self._val(ppr, "w:pStyle"),
            keep_next=self._toggle(ppr, "w:keepNext"),
            widow_control=self._toggle(ppr, "w:widowControl"),
            numbering=numbering,
            spacing=spacing,
            indent=indent,
            justification=self._val(ppr, "w:jc"),
            outline_level=self._int_val(ppr, "w:outlineLvl"),
        )

    def table(self, tbl_pr: Optional[ET.Element]) -> Optional[TableProperty]:
        if tbl_pr is None:
            return None
        width = width_type = None
        width_el = tbl_pr.find("w:tblW", Namespaces.WORD)
        if width_el is not None:
            width = self._int_attr(width_el, "w:w")
            width_type = width_el.get(qn("w:type"))
        return TableProperty(
            style_id=self._val(tbl_pr, "w:tblStyle"),
            width=width,
            width_type=width_type,
            justification=self._val(tbl_pr, "w:jc"),
        )

    # ------------------------------------------------------------------
    def _val(self, parent: ET.Element, tag: str) -> Optional[str]:
        child = parent.find(tag, Namespaces.WORD)
        if child is None:
            return None
        return child.get(qn("w:val"))

    def _int_val(self, parent: ET.Element, tag: str) -> Optional[int]:
        return to_int(self._val(parent, tag))

    def _int_attr(self, element: ET.Element, attr: str) -> Optional[int]:
        return to_int(element.get(qn(attr)))

    def _toggle(self, parent: ET.Element, tag: str) -> Optional[bool]:
        child = parent.find(tag, Namespaces.WORD)
        if child is None:
            return None
        value = child.get(qn("w:val"))
        return value is None or value.lower() not in _FALSE_VALUES
