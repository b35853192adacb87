# -*- coding: utf-8 -*-
"""Data models shared by extractors and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

__all__ = ["HandleIdMap", "SkillRecord"]


@dataclass(frozen=True)
class HandleIdMap:
    """
    Bidirectional handle <-> numeric ID table from the SKID enumeration.

    Both directions are read-only views. Build it with `from_entries`; a later
    entry overwrites an earlier one on either side, so a handle listed twice
    keeps its last ID and an ID listed twice keeps its last handle.
    """

    handle_to_id: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    id_to_handle: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[str, int]]) -> "HandleIdMap":
        h2i: Dict[str, int] = {}
        i2h: Dict[int, str] = {}
        for handle, sid in entries:
            h2i[handle] = sid
            i2h[sid] = handle
        return cls(handle_to_id=MappingProxyType(h2i), id_to_handle=MappingProxyType(i2h))

    def resolve(self, handle: str) -> Optional[int]:
        return self.handle_to_id.get(handle)

    def handle_for(self, skill_id: int) -> Optional[str]:
        return self.id_to_handle.get(skill_id)

    def sorted_items(self) -> List[Tuple[int, str]]:
        """(id, handle) pairs in ascending ID order."""
        return sorted(self.id_to_handle.items())

    def __len__(self) -> int:
        return len(self.id_to_handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self.handle_to_id


@dataclass(frozen=True)
class SkillRecord:
    """One `[KEY] = { ... }` record walked in skillinfolist."""

    key: str
    body: str
    skill_id: Optional[int]
    name: str
