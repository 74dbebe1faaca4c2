"""Font table model (``word/fontTable.xml``)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class Font:
    name: str
    alt_name: Optional[str] = None
    charset: Optional[str] = None
    family: Optional[str] = None
    pitch: Optional[str] = None


@dataclass(slots=True)
class FontTable:
    fonts: List[Font] = field(default_factory=list)

    def create_font(self, name: str) -> Font:
        font = Font(name=name)
        self.fonts.append(font)
        return font
