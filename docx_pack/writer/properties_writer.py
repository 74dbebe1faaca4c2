"""Serialize docProps/app.xml and docProps/core.xml."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.properties_model import App, Core
from docx_pack.parser.properties_parser import APP_FIELDS, CORE_FIELDS
from docx_pack.utils.xml_utils import (
    CORE_PROPS_NS,
    EXTENDED_PROPS_NS,
    XSI_NS,
    to_xml_bytes,
)

_W3CDTF_FIELDS = {"created", "modified"}


class AppWriter:
    def __init__(self, app: App) -> None:
        self._app = app

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element("Properties", xmlns=EXTENDED_PROPS_NS)
        for name, tag in APP_FIELDS:
            value = getattr(self._app, name)
            if value is not None:
                ET.SubElement(root, tag).text = value
        return root


class CoreWriter:
    def __init__(self, core: Core) -> None:
        self._core = core

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element(f"{{{CORE_PROPS_NS}}}coreProperties")
        for name, namespace, tag in CORE_FIELDS:
            value = getattr(self._core, name)
            if value is None:
                continue
            element = ET.SubElement(root, f"{{{namespace}}}{tag}")
            element.text = value
            if name in _W3CDTF_FIELDS:
                element.set(f"{{{XSI_NS}}}type", "dcterms:W3CDTF")
        return root
