"""Extract style definitions from styles.xml."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_pack.model.style_model import DocDefaults, LatentStyle, LatentStyles, Style, Styles
from docx_pack.parser.formatting_parser import FormattingParser, to_int
from docx_pack.utils.xml_utils import Namespaces, expect_root, qn

STYLES_TAG = qn("w:styles")


class StylesParser:
    """Parse Word styles as stored; ``basedOn`` chains are kept, not resolved."""

    def __init__(self, styles_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._styles_xml = styles_xml
        self._path = path
        self._formatting = FormattingParser()

    def parse(self) -> Styles:
        """Parse the XML tree and return the styles part."""
        root = expect_root(self._styles_xml, STYLES_TAG, self._path)
        return Styles(
            doc_defaults=self._parse_doc_defaults(root.find("w:docDefaults", Namespaces.WORD)),
            latent_styles=self._parse_latent_styles(root.find("w:latentStyles", Namespaces.WORD)),
            styles=self._collect_styles(root),
        )

    def _collect_styles(self, root: ET.Element) -> List[Style]:
        styles: List[Style] = []
        for style_el in root.findall("w:style", Namespaces.WORD):
            styles.append(
                Style(
                    style_type=style_el.get(qn("w:type"), "paragraph"),
                    style_id=style_el.get(qn("w:styleId"), ""),
                    name=self._get_attr(style_el, "w:name", "w:val"),
                    based_on=self._get_attr(style_el, "w:basedOn", "w:val"),
                    next_style=self._get_attr(style_el, "w:next", "w:val"),
                    linked_style=self._get_attr(style_el, "w:link", "w:val"),
                    ui_priority=to_int(self._get_attr(style_el, "w:uiPriority", "w:val")),
                    q_format=style_el.find("w:qFormat", Namespaces.WORD) is not None,
                    is_default=style_el.get(qn("w:default")) in ("1", "true"),
                    paragraph=self._formatting.paragraph(style_el.find("w:pPr", Namespaces.WORD)),
                    character=self._formatting.character(style_el.find("w:rPr", Namespaces.WORD)),
                    table=self._formatting.table(style_el.find("w:tblPr", Namespaces.WORD)),
                )
            )
        return styles

    def _parse_doc_defaults(self, element: Optional[ET.Element]) -> Optional[DocDefaults]:
        if element is None:
            return None
        return DocDefaults(
            character=self._formatting.character(element.find("w:rPrDefault/w:rPr", Namespaces.WORD)),
            paragraph=self._formatting.paragraph(element.find("w:pPrDefault/w:pPr", Namespaces.WORD)),
        )

    def _parse_latent_styles(self, element: Optional[ET.Element]) -> Optional[LatentStyles]:
        if element is None:
            return None
        exceptions = [
            LatentStyle(
                name=exc_el.get(qn("w:name")),
                semi_hidden=to_int(exc_el.get(qn("w:semiHidden"))),
                ui_priority=to_int(exc_el.get(qn("w:uiPriority"))),
                unhide_when_used=to_int(exc_el.get(qn("w:unhideWhenUsed"))),
                q_format=to_int(exc_el.get(qn("w:qFormat"))),
            )
            for exc_el in element.findall("w:lsdException", Namespaces.WORD)
        ]
        return LatentStyles(
            def_locked_state=to_int(element.get(qn("w:defLockedState"))),
            def_ui_priority=to_int(element.get(qn("w:defUIPriority"))),
            def_semi_hidden=to_int(element.get(qn("w:defSemiHidden"))),
            def_unhide_when_used=to_int(element.get(qn("w:defUnhideWhenUsed"))),
            def_q_format=to_int(element.get(qn("w:defQFormat"))),
            count=to_int(element.get(qn("w:count"))),
            exceptions=exceptions,
        )

    def _get_attr(self, element: ET.Element, child_name: str, attr_name: str) -> Optional[str]:
        child = element.find(child_name, Namespaces.WORD)
        if child is None:
            return None
        return child.get(qn(attr_name))
