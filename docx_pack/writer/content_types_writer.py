"""Serialize the content-type registry."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.content_types import ContentTypes
from docx_pack.utils.xml_utils import CONTENT_TYPES_NS, to_xml_bytes


class ContentTypesWriter:
    """Emit all ``Default`` entries followed by all ``Override`` entries."""

    def __init__(self, content_types: ContentTypes) -> None:
        self._content_types = content_types

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        # Unprefixed names inherit the default namespace declared on the root.
        root = ET.Element("Types", xmlns=CONTENT_TYPES_NS)
        for extension, content_type in self._content_types.defaults.items():
            ET.SubElement(root, "Default", {"Extension": extension, "ContentType": content_type})
        for part_name, content_type in self._content_types.overrides.items():
            ET.SubElement(root, "Override", {"PartName": part_name, "ContentType": content_type})
        return root
