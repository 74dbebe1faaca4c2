"""Open Packaging Convention relationship graphs."""
from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterable, Iterator, List, Optional, Set

_RID_PATTERN = re.compile(r"^rId(\d+)$")

TARGET_MODE_EXTERNAL = "External"


@dataclass(frozen=True)
class Relationship:
    """Represents a single OPC relationship."""

    r_id: str
    rel_type: str
    target: str
    target_mode: Optional[str] = None

    @property
    def is_external(self) -> bool:
        return self.target_mode == TARGET_MODE_EXTERNAL


class RelationshipIdAllocator:
    """Hands out ``rId<N>`` tokens; only moves forward."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    @classmethod
    def after(cls, existing: Iterable[str]) -> "RelationshipIdAllocator":
        """Seed an allocator past the highest numeric ``rId`` among ``existing``."""
        highest = 0
        for r_id in existing:
            match = _RID_PATTERN.match(r_id)
            if match:
                highest = max(highest, int(match.group(1)))
        return cls(highest + 1)

    @property
    def next_value(self) -> int:
        return self._next

    def allocate(self, taken: Set[str]) -> str:
        while f"rId{self._next}" in taken:
            self._next += 1
        r_id = f"rId{self._next}"
        self._next += 1
        return r_id


class Relationships:
    """Ordered relationship graph owned by the package or by a single part.

    Insertion order is id-allocation order for locally added entries; ids
    read from an existing part are kept verbatim.
    """

    def __init__(self, relationships: Iterable[Relationship] = (), source_part: str = "") -> None:
        self.source_part = source_part
        self._relationships: List[Relationship] = []
        self._ids: Set[str] = set()
        for rel in relationships:
            self._append(rel)
        self._allocator = RelationshipIdAllocator.after(self._ids)

    def add_rel(self, rel_type: str, target: str, target_mode: Optional[str] = None) -> str:
        """Allocate the next unused id, append the relationship and return the id."""
        r_id = self._allocator.allocate(self._ids)
        self._append(Relationship(r_id=r_id, rel_type=rel_type, target=target, target_mode=target_mode))
        return r_id

    def get(self, r_id: str) -> Optional[Relationship]:
        for rel in self._relationships:
            if rel.r_id == r_id:
                return rel
        return None

    def by_type(self, rel_type: str) -> List[Relationship]:
        return [rel for rel in self._relationships if rel.rel_type == rel_type]

    def resolve_target(self, rel: Relationship) -> str:
        """Return the package path a relationship points to."""
        if rel.is_external:
            return rel.target
        if rel.target.startswith("/"):
            return rel.target.lstrip("/")
        base_dir = PurePosixPath(self.source_part).parent
        return posixpath.normpath(base_dir.joinpath(rel.target).as_posix())

    def targets(self) -> List[str]:
        return [self.resolve_target(rel) for rel in self._relationships]

    def _append(self, rel: Relationship) -> None:
        if rel.r_id in self._ids:
            raise ValueError(f"Duplicate relationship id: {rel.r_id}")
        self._relationships.append(rel)
        self._ids.add(rel.r_id)

    def __iter__(self) -> Iterator[Relationship]:
        return iter(list(self._relationships))

    def __len__(self) -> int:
        return len(self._relationships)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relationships):
            return NotImplemented
        return self._relationships == other._relationships

    def __repr__(self) -> str:
        return f"Relationships(source_part={self.source_part!r}, relationships={self._relationships!r})"
