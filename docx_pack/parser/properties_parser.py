"""Parse docProps/app.xml and docProps/core.xml."""
from __future__ import annotations

from typing import Dict, Optional, Tuple
from xml.etree import ElementTree as ET

from docx_pack.model.properties_model import App, Core
from docx_pack.utils.xml_utils import (
    CORE_PROPS_NS,
    DC_NS,
    DCTERMS_NS,
    EXTENDED_PROPS_NS,
    expect_root,
    find_text,
)

# (model field, element tag) in schema order; shared with the writer.
APP_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("template", "Template"),
    ("total_time", "TotalTime"),
    ("pages", "Pages"),
    ("words", "Words"),
    ("characters", "Characters"),
    ("application", "Application"),
    ("doc_security", "DocSecurity"),
    ("lines", "Lines"),
    ("paragraphs", "Paragraphs"),
    ("company", "Company"),
    ("characters_with_spaces", "CharactersWithSpaces"),
    ("app_version", "AppVersion"),
)

CORE_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("title", DC_NS, "title"),
    ("subject", DC_NS, "subject"),
    ("creator", DC_NS, "creator"),
    ("keywords", CORE_PROPS_NS, "keywords"),
    ("description", DC_NS, "description"),
    ("last_modified_by", CORE_PROPS_NS, "lastModifiedBy"),
    ("revision", CORE_PROPS_NS, "revision"),
    ("category", CORE_PROPS_NS, "category"),
    ("created", DCTERMS_NS, "created"),
    ("modified", DCTERMS_NS, "modified"),
)


class AppParser:
    def __init__(self, app_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._app_xml = app_xml
        self._path = path

    def parse(self) -> App:
        root = expect_root(self._app_xml, f"{{{EXTENDED_PROPS_NS}}}Properties", self._path)
        values: Dict[str, Optional[str]] = {
            name: find_text(root, f"{{{EXTENDED_PROPS_NS}}}{tag}") for name, tag in APP_FIELDS
        }
        return App(**values)


class CoreParser:
    def __init__(self, core_xml: ET.ElementTree, path: Optional[str] = None) -> None:
        self._core_xml = core_xml
        self._path = path

    def parse(self) -> Core:
        root = expect_root(self._core_xml, f"{{{CORE_PROPS_NS}}}coreProperties", self._path)
        values: Dict[str, Optional[str]] = {
            name: find_text(root, f"{{{namespace}}}{tag}") for name, namespace, tag in CORE_FIELDS
        }
        return Core(**values)
