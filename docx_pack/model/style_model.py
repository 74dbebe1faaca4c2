"""Style model captures Word style definitions as stored in styles.xml."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from docx_pack.model.formatting import CharacterProperty, ParagraphProperty, TableProperty


@dataclass(slots=True)
class Style:
    """A single ``w:style`` definition. No inheritance is resolved."""

    style_type: str = "paragraph"
    style_id: str = ""
    name: Optional[str] = None
    based_on: Optional[str] = None
    next_style: Optional[str] = None
    linked_style: Optional[str] = None
    ui_priority: Optional[int] = None
    q_format: bool = False
    is_default: bool = False
    paragraph: Optional[ParagraphProperty] = None
    character: Optional[CharacterProperty] = None
    table: Optional[TableProperty] = None


@dataclass(slots=True)
class LatentStyle:
    """Latent style exception (``w:lsdException``)."""

    name: Optional[str] = None
    semi_hidden: Optional[int] = None
    ui_priority: Optional[int] = None
    unhide_when_used: Optional[int] = None
    q_format: Optional[int] = None


@dataclass(slots=True)
class LatentStyles:
    """Defaults for styles known to the application but not stored in the part."""

    def_locked_state: Optional[int] = None
    def_ui_priority: Optional[int] = None
    def_semi_hidden: Optional[int] = None
    def_unhide_when_used: Optional[int] = None
    def_q_format: Optional[int] = None
    count: Optional[int] = None
    exceptions: List[LatentStyle] = field(default_factory=list)


@dataclass(slots=True)
class DocDefaults:
    """Document-wide default run and paragraph properties."""

    character: Optional[CharacterProperty] = None
    paragraph: Optional[ParagraphProperty] = None


@dataclass(slots=True)
class Styles:
    """The style definitions part (``word/styles.xml``)."""

    doc_defaults: Optional[DocDefaults] = None
    latent_styles: Optional[LatentStyles] = None
    styles: List[Style] = field(default_factory=list)

    def create_style(self) -> Style:
        """Append an empty style and return it for in-place configuration."""
        style = Style()
        self.styles.append(style)
        return style

    def insert_style(self, style: Style) -> "Styles":
        self.styles.append(style)
        return self

    def get(self, style_id: Optional[str]) -> Optional[Style]:
        """Return the style with the given identifier if defined."""
        if style_id is None:
            return None
        for style in self.styles:
            if style.style_id == style_id:
                return style
        return None

    def default_for(self, style_type: str) -> Optional[Style]:
        """Return the default style for the given style type if defined."""
        for style in self.styles:
            if style.style_type == style_type and style.is_default:
                return style
        return None
