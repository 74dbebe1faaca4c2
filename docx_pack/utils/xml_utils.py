"""Helper functions to work with XML namespaces, parsing and serialization."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Union
from xml.etree import ElementTree as ET

import defusedxml.ElementTree as SafeET
from defusedxml import DefusedXmlException

from docx_pack.utils.errors import SerializationError, XmlStructureError

WORD_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
RELS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
CORE_PROPS_NS = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
EXTENDED_PROPS_NS = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
DOC_PROPS_VTYPES_NS = "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"
DCMITYPE_NS = "http://purl.org/dc/dcmitype/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XML_NS = "http://www.w3.org/XML/1998/namespace"

XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across parsers."""

    WORD: Dict[str, str] = None  # type: ignore[assignment]
    RELS: Dict[str, str] = None  # type: ignore[assignment]
    CONTENT_TYPES: Dict[str, str] = None  # type: ignore[assignment]
    CORE: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


Namespaces.WORD = {"w": WORD_NS}  # type: ignore[attr-defined]
Namespaces.RELS = {"rel": RELS_NS}  # type: ignore[attr-defined]
Namespaces.CONTENT_TYPES = {"ct": CONTENT_TYPES_NS}  # type: ignore[attr-defined]
Namespaces.CORE = {  # type: ignore[attr-defined]
    "cp": CORE_PROPS_NS,
    "dc": DC_NS,
    "dcterms": DCTERMS_NS,
    "dcmitype": DCMITYPE_NS,
    "xsi": XSI_NS,
}

for _prefix, _uri in (
    ("w", WORD_NS),
    ("cp", CORE_PROPS_NS),
    ("dc", DC_NS),
    ("dcterms", DCTERMS_NS),
    ("dcmitype", DCMITYPE_NS),
    ("xsi", XSI_NS),
    ("vt", DOC_PROPS_VTYPES_NS),
):
    ET.register_namespace(_prefix, _uri)


def parse_xml(data: Union[str, bytes], path: Optional[str] = None) -> ET.ElementTree:
    """Parse untrusted XML text into a tree, reporting failures against ``path``."""
    try:
        return ET.ElementTree(SafeET.fromstring(data))
    except ET.ParseError as exc:
        raise XmlStructureError(f"malformed XML ({exc})", path) from exc
    except DefusedXmlException as exc:
        raise XmlStructureError(f"forbidden XML construct ({exc})", path) from exc


def expect_root(tree: ET.ElementTree, tag: str, path: Optional[str] = None) -> ET.Element:
    """Return the root element, failing when it is not the expected ``{ns}local`` tag."""
    root = tree.getroot()
    if root.tag != tag:
        raise XmlStructureError(f"expected root element {tag}, found {root.tag}", path)
    return root


def qn(tag: str) -> str:
    """Expand a ``w:name`` style tag into Clark notation."""
    prefix, local = tag.split(":", 1)
    if prefix == "w":
        return f"{{{WORD_NS}}}{local}"
    if prefix == "xml":
        return f"{{{XML_NS}}}{local}"
    namespace = Namespaces.CORE.get(prefix)
    if namespace is None:
        raise KeyError(f"Unknown namespace prefix: {prefix}")
    return f"{{{namespace}}}{local}"


def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def find_text(element: ET.Element, xpath: str, namespaces: Optional[Dict[str, str]] = None) -> Optional[str]:
    """Return the verbatim text of the first match; ``""`` for an empty element, ``None`` when absent."""
    found = element.find(xpath, namespaces or {})
    if found is None:
        return None
    return found.text or ""


# Characters outside the XML 1.0 ``Char`` production.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def to_xml_bytes(element: ET.Element) -> bytes:
    """Serialize an element tree with a standalone UTF-8 declaration.

    Carriage returns are written as character references so they survive
    end-of-line normalization on the way back in.
    """
    body = ET.tostring(element, encoding="unicode")
    invalid = _INVALID_XML_CHARS.search(body)
    if invalid is not None:
        raise SerializationError(
            f"character {invalid.group()!r} is not allowed in XML (offset {invalid.start()})"
        )
    return XML_DECLARATION + body.replace("\r", "&#13;").encode("utf-8")
