"""In-memory representation of the main document part."""
from __future__ import annotations

import builtins
from dataclasses import dataclass, field
from typing import List, Optional, Union

from docx_pack.model.formatting import CharacterProperty, ParagraphProperty, TableProperty


@dataclass(slots=True)
class Text:
    """Literal text inside a run (``w:t``)."""

    text: str
    preserve_space: bool = False

    def __post_init__(self) -> None:
        if self.text != self.text.strip():
            self.preserve_space = True


@dataclass(slots=True)
class Break:
    """Line, page or column break inside a run (``w:br``)."""

    break_type: Optional[str] = None


RunContent = Union[Text, Break]


@dataclass(slots=True)
class Run:
    """Contiguous content sharing one set of character properties."""

    content: List[RunContent] = field(default_factory=list)
    property: Optional[CharacterProperty] = None

    def push_text(self, text: str) -> "Run":
        self.content.append(Text(text))
        return self

    def push_break(self, break_type: Optional[str] = None) -> "Run":
        self.content.append(Break(break_type))
        return self

    @builtins.property
    def text(self) -> str:
        return "".join(item.text for item in self.content if isinstance(item, Text))


@dataclass(slots=True)
class Paragraph:
    """Block element for paragraphs in the document body."""

    runs: List[Run] = field(default_factory=list)
    property: Optional[ParagraphProperty] = None

    def push_run(self, run: Run) -> "Paragraph":
        self.runs.append(run)
        return self

    def push_text(self, text: str) -> "Paragraph":
        """Append a new run holding ``text``."""
        self.runs.append(Run().push_text(text))
        return self

    @builtins.property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(slots=True)
class TableCell:
    """Single table cell container.

    A cell must hold at least one paragraph on disk, so an empty ``content``
    is written as one empty paragraph and reads back as ``[Paragraph()]``.
    """

    content: List[Paragraph] = field(default_factory=list)
    width: Optional[int] = None


@dataclass(slots=True)
class TableRow:
    """Row with a sequence of cells."""

    cells: List[TableCell] = field(default_factory=list)


@dataclass(slots=True)
class Table:
    """Tabular block element."""

    rows: List[TableRow] = field(default_factory=list)
    property: Optional[TableProperty] = None
    grid: List[int] = field(default_factory=list)


BodyContent = Union[Paragraph, Table]


@dataclass(slots=True)
class Body:
    """Ordered block-level content of the document."""

    content: List[BodyContent] = field(default_factory=list)
    section_xml: Optional[str] = None


@dataclass(slots=True)
class Document:
    """The main document part (``word/document.xml``)."""

    body: Body = field(default_factory=Body)
