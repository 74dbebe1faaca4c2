"""Aggregate model of a WordprocessingML package."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from os import PathLike
from typing import IO, TYPE_CHECKING, List, Optional, Union

from docx_pack.model.content_types import ContentTypes
from docx_pack.model.elements import Document, Paragraph, Table
from docx_pack.model.font_model import Font, FontTable
from docx_pack.model.properties_model import App, Core
from docx_pack.model.relationships import Relationships
from docx_pack.model.style_model import Style, Styles

if TYPE_CHECKING:
    from docx_pack.writer.package_writer import WriteOptions

DOCUMENT_PART = "word/document.xml"


@dataclass(slots=True)
class Docx:
    """A WordprocessingML package: one document part plus optional dependents.

    ``rels`` is the package-level graph; ``document_rels`` is the graph
    anchored at the document part and stays ``None`` until a dependent part
    (styles, font table) is written or one is read from an archive.

    Writing mutates both graphs, so an instance supports one write pass.
    Call :meth:`reset_relationships` before writing it again.
    """

    document: Document = field(default_factory=Document)
    content_types: ContentTypes = field(default_factory=ContentTypes)
    rels: Relationships = field(default_factory=Relationships)
    app: Optional[App] = None
    core: Optional[Core] = None
    styles: Optional[Styles] = None
    font_table: Optional[FontTable] = None
    document_rels: Optional[Relationships] = None

    # ------------------------------------------------------------------
    # Content helpers
    def insert_para(self, para: Paragraph) -> "Docx":
        self.document.body.content.append(para)
        return self

    def insert_table(self, table: Table) -> "Docx":
        self.document.body.content.append(table)
        return self

    def insert_style(self, style: Style) -> "Docx":
        self._ensure_styles().insert_style(style)
        return self

    def create_style(self) -> Style:
        """Create a style in the (possibly new) styles part and return it."""
        return self._ensure_styles().create_style()

    def create_font(self, name: str) -> Font:
        if self.font_table is None:
            self.font_table = FontTable()
        return self.font_table.create_font(name)

    def ensure_document_rels(self) -> Relationships:
        """Materialise the part-level graph on first use and return it."""
        if self.document_rels is None:
            self.document_rels = Relationships(source_part=DOCUMENT_PART)
        return self.document_rels

    def reset_relationships(self) -> "Docx":
        """Drop both relationship graphs so the aggregate can be written again."""
        self.rels = Relationships()
        self.document_rels = None
        return self

    # ------------------------------------------------------------------
    # Integrity
    def missing_relationships(self) -> List[str]:
        """Return names of present parts that no relationship in their scope targets."""
        from docx_pack.parts import PART_SPECS, RelScope

        missing: List[str] = []
        for spec in PART_SPECS:
            if spec.scope is RelScope.NONE or getattr(self, spec.name) is None:
                continue
            graph = self.rels if spec.scope is RelScope.PACKAGE else self.document_rels
            if graph is None or not any(
                rel.rel_type == spec.rel_type and graph.resolve_target(rel) == spec.path for rel in graph
            ):
                missing.append(spec.name)
        return missing

    # ------------------------------------------------------------------
    # Output
    def write(self, stream: IO[bytes], options: Optional["WriteOptions"] = None) -> IO[bytes]:
        """Serialize the package into ``stream`` and return it."""
        from docx_pack.writer.package_writer import DocxWriter

        return DocxWriter(self, options).write(stream)

    def write_file(self, path: Union[str, PathLike], options: Optional["WriteOptions"] = None) -> None:
        from docx_pack.writer.package_writer import DocxWriter

        DocxWriter(self, options).write_file(path)

    def into_owned(self) -> "Docx":
        """Return a deep copy that shares no mutable state with this aggregate."""
        return copy.deepcopy(self)

    def _ensure_styles(self) -> Styles:
        if self.styles is None:
            self.styles = Styles()
        return self.styles
