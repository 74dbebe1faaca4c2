"""Read Open Packaging Convention relationship parts."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_pack.model.relationships import Relationship, Relationships
from docx_pack.utils.errors import XmlStructureError
from docx_pack.utils.xml_utils import RELS_NS, Namespaces, expect_root


def source_part_for(rels_path: str) -> str:
    """Map a ``.rels`` part name to the part it describes (``""`` for the package)."""
    if rels_path == "_rels/.rels":
        return ""
    if "/_rels/" in rels_path:
        folder, suffix = rels_path.split("/_rels/", 1)
        return f"{folder}/{suffix[:-5]}"
    if rels_path.startswith("_rels/"):
        return rels_path[len("_rels/") : -5]
    return rels_path[:-5]


class RelationshipsParser:
    """Rebuild a relationship graph, keeping ids exactly as written."""

    def __init__(self, rels_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._rels_xml = rels_xml
        self._path = path

    def parse(self) -> Relationships:
        root = expect_root(self._rels_xml, f"{{{RELS_NS}}}Relationships", self._path)
        parsed: List[Relationship] = []
        for rel_el in root.findall("rel:Relationship", Namespaces.RELS):
            r_id = rel_el.get("Id")
            rel_type = rel_el.get("Type")
            target = rel_el.get("Target")
            if not r_id or not rel_type or target is None:
                raise XmlStructureError("Relationship requires Id, Type and Target", self._path)
            parsed.append(
                Relationship(r_id=r_id, rel_type=rel_type, target=target, target_mode=rel_el.get("TargetMode"))
            )
        source_part = source_part_for(self._path) if self._path else ""
        try:
            return Relationships(parsed, source_part=source_part)
        except ValueError as exc:
            raise XmlStructureError(str(exc), self._path) from exc
