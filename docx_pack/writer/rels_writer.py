"""Serialize a relationship graph."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pack.model.relationships import Relationships
from docx_pack.utils.xml_utils import RELS_NS, to_xml_bytes


class RelationshipsWriter:
    """Emit every relationship in insertion order."""

    def __init__(self, relationships: Relationships) -> None:
        self._relationships = relationships

    def to_xml(self) -> bytes:
        return to_xml_bytes(self.to_element())

    def to_element(self) -> ET.Element:
        root = ET.Element("Relationships", xmlns=RELS_NS)
        for rel in self._relationships:
            attrs = {"Id": rel.r_id, "Type": rel.rel_type, "Target": rel.target}
            if rel.target_mode:
                attrs["TargetMode"] = rel.target_mode
            ET.SubElement(root, "Relationship", attrs)
        return root
