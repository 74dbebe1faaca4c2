"""Content-type registry (``[Content_Types].xml``)."""
from __future__ import annotations

import posixpath
from typing import Dict, Iterable, Optional, Tuple

CONTENT_TYPE_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"
CONTENT_TYPE_XML = "application/xml"


def normalize_part_name(path: str) -> str:
    """Return the part name form used by overrides: absolute, forward slashes."""
    return "/" + path.replace("\\", "/").lstrip("/")


class ContentTypes:
    """Extension-level defaults plus path-level overrides.

    The two tables are kept apart: an override is never folded into a
    default, even when the extension already maps to the same type.
    """

    def __init__(
        self,
        defaults: Optional[Iterable[Tuple[str, str]]] = None,
        overrides: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> None:
        self._defaults: Dict[str, str] = {}
        self._overrides: Dict[str, str] = {}
        if defaults is None:
            defaults = (("rels", CONTENT_TYPE_RELATIONSHIPS), ("xml", CONTENT_TYPE_XML))
        for extension, content_type in defaults:
            self.register_default(extension, content_type)
        for path, content_type in overrides or ():
            self.register_override(path, content_type)

    @classmethod
    def empty(cls) -> "ContentTypes":
        return cls(defaults=())

    @property
    def defaults(self) -> Dict[str, str]:
        return dict(self._defaults)

    @property
    def overrides(self) -> Dict[str, str]:
        return dict(self._overrides)

    def register_default(self, extension: str, content_type: str) -> "ContentTypes":
        self._defaults[extension.lstrip(".").lower()] = content_type
        return self

    def register_override(self, path: str, content_type: str) -> "ContentTypes":
        self._overrides[normalize_part_name(path)] = content_type
        return self

    def resolve(self, path: str) -> Optional[str]:
        """Return the effective content type of ``path``; overrides win over defaults."""
        part_name = normalize_part_name(path)
        override = self._overrides.get(part_name)
        if override is not None:
            return override
        # ``/_rels/.rels`` has extension ``rels`` even though its stem is empty.
        segment = posixpath.basename(part_name)
        if "." not in segment:
            return None
        extension = segment.rpartition(".")[2].lower()
        if not extension:
            return None
        return self._defaults.get(extension)

    def cover(self, path: str, content_type: str) -> bool:
        """Make ``path`` resolve to ``content_type``; returns True if an override was added."""
        if self.resolve(path) == content_type:
            return False
        self.register_override(path, content_type)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentTypes):
            return NotImplemented
        return self._defaults == other._defaults and self._overrides == other._overrides

    def __repr__(self) -> str:
        return f"ContentTypes(defaults={self._defaults!r}, overrides={self._overrides!r})"
