"""Serialize the style definitions part."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.style_model import DocDefaults, LatentStyles, Style, Styles
from docx_pack.utils.xml_utils import qn, to_xml_bytes
from docx_pack.writer.formatting_writer import FormattingWriter, w_attrs


class StylesWriter:
    def __init__(self, styles: Styles) -> None:
        self._styles = styles
        self._formatting = FormattingWriter()

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element(qn("w:styles"))
        if self._styles.doc_defaults is not None:
            self._write_doc_defaults(root, self._styles.doc_defaults)
        if self._styles.latent_styles is not None:
            self._write_latent_styles(root, self._styles.latent_styles)
        for style in self._styles.styles:
            self._write_style(root, style)
        return root

    def _write_doc_defaults(self, root: ET.Element, defaults: DocDefaults) -> None:
        element = ET.SubElement(root, qn("w:docDefaults"))
        if defaults.character is not None:
            self._formatting.character(ET.SubElement(element, qn("w:rPrDefault")), defaults.character)
        if defaults.paragraph is not None:
            self._formatting.paragraph(ET.SubElement(element, qn("w:pPrDefault")), defaults.paragraph)

    def _write_latent_styles(self, root: ET.Element, latent: LatentStyles) -> None:
        element = ET.SubElement(
            root,
            qn("w:latentStyles"),
            w_attrs(
                {
                    "w:defLockedState": latent.def_locked_state,
                    "w:defUIPriority": latent.def_ui_priority,
                    "w:defSemiHidden": latent.def_semi_hidden,
                    "w:defUnhideWhenUsed": latent.def_unhide_when_used,
                    "w:defQFormat": latent.def_q_format,
                    "w:count": latent.count,
                }
            ),
        )
        for exception in latent.exceptions:
            ET.SubElement(
                element,
                qn("w:lsdException"),
                w_attrs(
                    {
                        "w:name": exception.name,
                        "w:semiHidden": exception.semi_hidden,
                        "w:uiPriority": exception.ui_priority,
                        "w:unhideWhenUsed": exception.unhide_when_used,
                        "w:qFormat": exception.q_format,
                    }
                ),
            )

    def _write_style(self, root: ET.Element, style: Style) -> None:
        attrs = {qn("w:type"): style.style_type, qn("w:styleId"): style.style_id}
        if style.is_default:
            attrs[qn("w:default")] = "1"
        style_el = ET.SubElement(root, qn("w:style"), attrs)
        for tag, value in (
            ("w:name", style.name),
            ("w:basedOn", style.based_on),
            ("w:next", style.next_style),
            ("w:link", style.linked_style),
            ("w:uiPriority", style.ui_priority),
        ):
            if value is not None:
                ET.SubElement(style_el, qn(tag), {qn("w:val"): str(value)})
        if style.q_format:
            ET.SubElement(style_el, qn("w:qFormat"))
        self._formatting.paragraph(style_el, style.paragraph)
        self._formatting.character(style_el, style.character)
        self._formatting.table(style_el, style.table)
