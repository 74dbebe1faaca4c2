"""Document property parts stored under docProps/."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class App:
    """Extended (application) properties, ``docProps/app.xml``."""

    template: Optional[str] = None
    total_time: Optional[str] = None
    pages: Optional[str] = None
    words: Optional[str] = None
    characters: Optional[str] = None
    application: Optional[str] = None
    doc_security: Optional[str] = None
    lines: Optional[str] = None
    paragraphs: Optional[str] = None
    company: Optional[str] = None
    characters_with_spaces: Optional[str] = None
    app_version: Optional[str] = None


@dataclass(slots=True)
class Core:
    """Core (Dublin Core) properties, ``docProps/core.xml``."""

    title: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    keywords: Optional[str] = None
    description: Optional[str] = None
    last_modified_by: Optional[str] = None
    revision: Optional[str] = None
    category: Optional[str] = None
    created: Optional[str] = None
    modified: Optional[str] = None
