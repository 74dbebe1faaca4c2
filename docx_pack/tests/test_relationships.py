"""Tests for relationship graphs, id allocation and target resolution."""
import unittest

from docx_pack.model.relationships import Relationship, RelationshipIdAllocator, Relationships
from docx_pack.parser.rels_parser import RelationshipsParser, source_part_for
from docx_pack.parts import SCHEMA_FONT_TABLE, SCHEMA_STYLES
from docx_pack.utils.errors import XmlStructureError
from docx_pack.utils.xml_utils import parse_xml
from docx_pack.writer.rels_writer import RelationshipsWriter

OFFICE_RELS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

doc_rels_xml = f"""
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="rId3" Type="{OFFICE_RELS}/styles" Target="styles.xml"/>
  <Relationship Id="rId7" Type="{OFFICE_RELS}/image" Target="media/image1.png"/>
  <Relationship Id="hyperlinkA" Type="{OFFICE_RELS}/hyperlink" Target="https://example.com" TargetMode="External"/>
  <Relationship Id="rId9" Type="{OFFICE_RELS}/customXml" Target="../customXml/item1.xml"/>
</Relationships>
"""


def parse_rels(xml: str, path: str = "word/_rels/document.xml.rels") -> Relationships:
    return RelationshipsParser(parse_xml(xml, path), path).parse()


class RelationshipIdTest(unittest.TestCase):
    """Ids stay unique and never go backwards."""

    def test_sequential_ids_are_distinct(self) -> None:
        rels = Relationships()
        ids = [rels.add_rel(SCHEMA_STYLES, f"part{n}.xml") for n in range(25)]
        self.assertEqual(len(set(ids)), 25)
        self.assertEqual(ids[:3], ["rId1", "rId2", "rId3"])
        self.assertEqual([rel.r_id for rel in rels], ids)

    def test_allocation_after_sparse_parsed_ids(self) -> None:
        rels = parse_rels(doc_rels_xml)
        existing = {rel.r_id for rel in rels}

        new_id = rels.add_rel(SCHEMA_FONT_TABLE, "fontTable.xml")

        self.assertNotIn(new_id, existing)
        self.assertEqual(new_id, "rId10")
        self.assertEqual(len(rels), 5)

    def test_allocator_skips_taken_ids(self) -> None:
        allocator = RelationshipIdAllocator()
        self.assertEqual(allocator.allocate({"rId1", "rId2"}), "rId3")
        self.assertEqual(allocator.allocate(set()), "rId4")

    def test_allocator_seeded_from_existing(self) -> None:
        allocator = RelationshipIdAllocator.after(["rId2", "rId11", "other", "rIdX"])
        self.assertEqual(allocator.next_value, 12)

    def test_graphs_do_not_share_sequences(self) -> None:
        package = Relationships()
        document = Relationships(source_part="word/document.xml")
        package.add_rel(SCHEMA_STYLES, "a.xml")
        package.add_rel(SCHEMA_STYLES, "b.xml")
        self.assertEqual(document.add_rel(SCHEMA_STYLES, "styles.xml"), "rId1")


class RelationshipsParserTest(unittest.TestCase):
    """Validate parsing and target resolution."""

    def test_ids_preserved_verbatim(self) -> None:
        rels = parse_rels(doc_rels_xml)
        self.assertEqual([rel.r_id for rel in rels], ["rId3", "rId7", "hyperlinkA", "rId9"])
        link = rels.get("hyperlinkA")
        assert link is not None
        self.assertTrue(link.is_external)
        self.assertEqual(rels.by_type(SCHEMA_STYLES)[0].target, "styles.xml")

    def test_targets_resolved_against_source_part(self) -> None:
        rels = parse_rels(doc_rels_xml)
        self.assertEqual(rels.source_part, "word/document.xml")
        self.assertEqual(
            rels.targets(),
            ["word/styles.xml", "word/media/image1.png", "https://example.com", "customXml/item1.xml"],
        )

    def test_package_graph_resolution(self) -> None:
        rels = Relationships()
        r_id = rels.add_rel("urn:type", "word/document.xml")
        absolute = Relationship(r_id="rId99", rel_type="urn:type", target="/docProps/core.xml")
        self.assertEqual(rels.resolve_target(rels.get(r_id)), "word/document.xml")
        self.assertEqual(rels.resolve_target(absolute), "docProps/core.xml")

    def test_source_part_mapping(self) -> None:
        self.assertEqual(source_part_for("_rels/.rels"), "")
        self.assertEqual(source_part_for("word/_rels/document.xml.rels"), "word/document.xml")
        self.assertEqual(source_part_for("word/_rels/header1.xml.rels"), "word/header1.xml")

    def test_duplicate_ids_rejected(self) -> None:
        xml = """
        <Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
          <Relationship Id="rId1" Type="urn:a" Target="a.xml"/>
          <Relationship Id="rId1" Type="urn:b" Target="b.xml"/>
        </Relationships>
        """
        with self.assertRaises(XmlStructureError):
            parse_rels(xml)

    def test_missing_attributes_rejected(self) -> None:
        xml = """
        <Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
          <Relationship Id="rId1" Target="a.xml"/>
        </Relationships>
        """
        with self.assertRaises(XmlStructureError):
            parse_rels(xml)

    def test_writer_output_parses_back(self) -> None:
        rels = parse_rels(doc_rels_xml)
        rels.add_rel(SCHEMA_FONT_TABLE, "fontTable.xml")

        reparsed = parse_rels(RelationshipsWriter(rels).to_xml().decode("utf-8"))

        self.assertEqual(reparsed, rels)
        link = reparsed.get("hyperlinkA")
        assert link is not None
        self.assertEqual(link.target_mode, "External")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
