"""Formatting properties shared by document content and style definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Fonts:
    """Font slots of a run (``w:rFonts``)."""

    ascii: Optional[str] = None
    h_ansi: Optional[str] = None
    east_asia: Optional[str] = None
    cs: Optional[str] = None


@dataclass(slots=True)
class CharacterProperty:
    """Run-level formatting (``w:rPr``). Toggles are tri-state; ``None`` means unspecified."""

    style_id: Optional[str] = None
    fonts: Optional[Fonts] = None
    bold: Optional[bool] = None
    italics: Optional[bool] = None
    strike: Optional[bool] = None
    double_strike: Optional[bool] = None
    color: Optional[str] = None
    size: Optional[int] = None
    highlight: Optional[str] = None
    underline: Optional[str] = None
    lang: Optional[str] = None


@dataclass(slots=True)
class Spacing:
    before: Optional[int] = None
    after: Optional[int] = None
    line: Optional[int] = None
    line_rule: Optional[str] = None


@dataclass(slots=True)
class Indent:
    left: Optional[int] = None
    right: Optional[int] = None
    first_line: Optional[int] = None
    hanging: Optional[int] = None


@dataclass(slots=True)
class NumberingProperty:
    num_id: int
    level: int = 0


@dataclass(slots=True)
class ParagraphProperty:
    """Paragraph-level formatting (``w:pPr``)."""

    style_id: Optional[str] = None
    keep_next: Optional[bool] = None
    widow_control: Optional[bool] = None
    numbering: Optional[NumberingProperty] = None
    spacing: Optional[Spacing] = None
    indent: Optional[Indent] = None
    justification: Optional[str] = None
    outline_level: Optional[int] = None


@dataclass(slots=True)
class TableProperty:
    """Table-level formatting (``w:tblPr``)."""

    style_id: Optional[str] = None
    width: Optional[int] = None
    width_type: Optional[str] = None
    justification: Optional[str] = None
