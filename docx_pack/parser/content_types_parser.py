"""Read the content-type registry part."""
from __future__ import annotations

from typing import List, Optional, Tuple
from xml.etree import ElementTree as ET

from docx_pack.model.content_types import ContentTypes
from docx_pack.utils.errors import XmlStructureError
from docx_pack.utils.xml_utils import CONTENT_TYPES_NS, Namespaces, expect_root


class ContentTypesParser:
    """Parse ``Default`` and ``Override`` entries into separate tables."""

    def __init__(self, content_types_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._content_types_xml = content_types_xml
        self._path = path

    def parse(self) -> ContentTypes:
        root = expect_root(self._content_types_xml, f"{{{CONTENT_TYPES_NS}}}Types", self._path)
        defaults = self._collect(root, "ct:Default", "Extension")
        overrides = self._collect(root, "ct:Override", "PartName")
        return ContentTypes(defaults=defaults, overrides=overrides)

    def _collect(self, root: ET.Element, xpath: str, key_attr: str) -> List[Tuple[str, str]]:
        entries: List[Tuple[str, str]] = []
        for element in root.findall(xpath, Namespaces.CONTENT_TYPES):
            key = element.get(key_attr)
            content_type = element.get("ContentType")
            if not key or not content_type:
                raise XmlStructureError(f"{xpath} requires {key_attr} and ContentType", self._path)
            entries.append((key, content_type))
        return entries
