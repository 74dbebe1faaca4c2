"""Serialize the font table part."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.font_model import FontTable
from docx_pack.utils.xml_utils import qn, to_xml_bytes


class FontTableWriter:
    def __init__(self, font_table: FontTable) -> None:
        self._font_table = font_table

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element(qn("w:fonts"))
        for font in self._font_table.fonts:
            font_el = ET.SubElement(root, qn("w:font"), {qn("w:name"): font.name})
            for tag, value in (
                ("w:altName", font.alt_name),
                ("w:charset", font.charset),
                ("w:family", font.family),
                ("w:pitch", font.pitch),
            ):
                if value is not None:
                    ET.SubElement(font_el, qn(tag), {qn("w:val"): value})
        return root
