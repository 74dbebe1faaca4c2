"""Descriptor table of every part a package can hold.

Each row fixes the part's archive path, whether it is required, which
relationship graph references it and how to parse and serialize it. The
writer and the extractor both iterate this table; the row order is the
write order.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from docx_pack.model.content_types import CONTENT_TYPE_RELATIONSHIPS
from docx_pack.parser.content_types_parser import ContentTypesParser
from docx_pack.parser.document_parser import DocumentParser
from docx_pack.parser.font_table_parser import FontTableParser
from docx_pack.parser.properties_parser import AppParser, CoreParser
from docx_pack.parser.rels_parser import RelationshipsParser
from docx_pack.parser.styles_parser import StylesParser
from docx_pack.utils.xml_utils import parse_xml
from docx_pack.writer.content_types_writer import ContentTypesWriter
from docx_pack.writer.document_writer import DocumentWriter
from docx_pack.writer.font_table_writer import FontTableWriter
from docx_pack.writer.properties_writer import AppWriter, CoreWriter
from docx_pack.writer.rels_writer import RelationshipsWriter
from docx_pack.writer.styles_writer import StylesWriter

CONTENT_TYPES_PATH = "[Content_Types].xml"
PACKAGE_RELS_PATH = "_rels/.rels"
DOCUMENT_XML_PATH = "word/document.xml"
APP_PROPS_PATH = "docProps/app.xml"
CORE_PROPS_PATH = "docProps/core.xml"
STYLES_XML_PATH = "word/styles.xml"
FONT_TABLE_XML_PATH = "word/fontTable.xml"
DOCUMENT_RELS_PATH = "word/_rels/document.xml.rels"

OFFICE_REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
SCHEMA_OFFICE_DOCUMENT = f"{OFFICE_REL_NS}/officeDocument"
SCHEMA_REL_EXTENDED = f"{OFFICE_REL_NS}/extended-properties"
SCHEMA_CORE = "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
SCHEMA_STYLES = f"{OFFICE_REL_NS}/styles"
SCHEMA_FONT_TABLE = f"{OFFICE_REL_NS}/fontTable"

CONTENT_TYPE_DOCUMENT = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
CONTENT_TYPE_STYLES = "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml"
CONTENT_TYPE_FONT_TABLE = "application/vnd.openxmlformats-officedocument.wordprocessingml.fontTable+xml"
CONTENT_TYPE_EXTENDED = "application/vnd.openxmlformats-officedocument.extended-properties+xml"
CONTENT_TYPE_CORE = "application/vnd.openxmlformats-package.core-properties+xml"


class RelScope(enum.Enum):
    """Which relationship graph must reference a part."""

    NONE = "none"
    PACKAGE = "package"
    DOCUMENT = "document"


@dataclass(frozen=True)
class PartSpec:
    name: str
    path: str
    required: bool
    scope: RelScope
    parser: Callable[..., Any]
    writer: Callable[[Any], Any]
    content_type: Optional[str] = None
    rel_type: Optional[str] = None
    rel_target: Optional[str] = None

    def parse(self, text: Union[str, bytes]) -> Any:
        """Parse raw part text into its model value."""
        return self.parser(parse_xml(text, self.path), self.path).parse()

    def serialize(self, value: Any) -> bytes:
        return self.writer(value).to_xml()


PART_SPECS: Tuple[PartSpec, ...] = (
    PartSpec("content_types", CONTENT_TYPES_PATH, True, RelScope.NONE, ContentTypesParser, ContentTypesWriter),
    PartSpec(
        "app",
        APP_PROPS_PATH,
        False,
        RelScope.PACKAGE,
        AppParser,
        AppWriter,
        content_type=CONTENT_TYPE_EXTENDED,
        rel_type=SCHEMA_REL_EXTENDED,
        rel_target=APP_PROPS_PATH,
    ),
    PartSpec(
        "core",
        CORE_PROPS_PATH,
        False,
        RelScope.PACKAGE,
        CoreParser,
        CoreWriter,
        content_type=CONTENT_TYPE_CORE,
        rel_type=SCHEMA_CORE,
        rel_target=CORE_PROPS_PATH,
    ),
    PartSpec(
        "document",
        DOCUMENT_XML_PATH,
        True,
        RelScope.PACKAGE,
        DocumentParser,
        DocumentWriter,
        content_type=CONTENT_TYPE_DOCUMENT,
        rel_type=SCHEMA_OFFICE_DOCUMENT,
        rel_target=DOCUMENT_XML_PATH,
    ),
    PartSpec(
        "styles",
        STYLES_XML_PATH,
        False,
        RelScope.DOCUMENT,
        StylesParser,
        StylesWriter,
        content_type=CONTENT_TYPE_STYLES,
        rel_type=SCHEMA_STYLES,
        rel_target="styles.xml",
    ),
    PartSpec(
        "font_table",
        FONT_TABLE_XML_PATH,
        False,
        RelScope.DOCUMENT,
        FontTableParser,
        FontTableWriter,
        content_type=CONTENT_TYPE_FONT_TABLE,
        rel_type=SCHEMA_FONT_TABLE,
        rel_target="fontTable.xml",
    ),
    PartSpec(
        "rels",
        PACKAGE_RELS_PATH,
        True,
        RelScope.NONE,
        RelationshipsParser,
        RelationshipsWriter,
        content_type=CONTENT_TYPE_RELATIONSHIPS,
    ),
    PartSpec(
        "document_rels",
        DOCUMENT_RELS_PATH,
        False,
        RelScope.NONE,
        RelationshipsParser,
        RelationshipsWriter,
        content_type=CONTENT_TYPE_RELATIONSHIPS,
    ),
)

PARTS_BY_NAME: Dict[str, PartSpec] = {spec.name: spec for spec in PART_SPECS}
