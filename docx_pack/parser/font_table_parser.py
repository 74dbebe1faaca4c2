"""Parse the font table part."""
from __future__ import annotations

from typing import Optional
from xml.etree import ElementTree as ET

from docx_pack.model.font_model import Font, FontTable
from docx_pack.utils.xml_utils import Namespaces, expect_root, qn

FONTS_TAG = qn("w:fonts")


class FontTableParser:
    def __init__(self, font_table_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._font_table_xml = font_table_xml
        self._path = path

    def parse(self) -> FontTable:
        root = expect_root(self._font_table_xml, FONTS_TAG, self._path)
        table = FontTable()
        for font_el in root.findall("w:font", Namespaces.WORD):
            table.fonts.append(
                Font(
                    name=font_el.get(qn("w:name"), ""),
                    alt_name=self._val(font_el, "w:altName"),
                    charset=self._val(font_el, "w:charset"),
                    family=self._val(font_el, "w:family"),
                    pitch=self._val(font_el, "w:pitch"),
                )
            )
        return table

    @staticmethod
    def _val(element: ET.Element, tag: str) -> Optional[str]:
        child = element.find(tag, Namespaces.WORD)
        return None if child is None else child.get(qn("w:val"))
