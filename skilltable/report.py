# -*- coding: utf-8 -*-
"""Text reports: SKILL_id_handle.txt and skillnametable.txt."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping

from skilltable.errors import OutputError
from skilltable.models import HandleIdMap

__all__ = ["id_handle_lines", "name_table_lines", "write_lines"]


def id_handle_lines(handle_ids: HandleIdMap) -> List[str]:
    return [f"{sid} {handle}" for sid, handle in handle_ids.sorted_items()]


def name_table_lines(handle_ids: HandleIdMap, names: Mapping[int, str]) -> List[str]:
    """`HANDLE#Name#` for every ID that has both a handle and a name."""
    out: List[str] = []
    for sid, handle in handle_ids.sorted_items():
        name = names.get(sid)
        if not name:
            continue
        out.append(f"{handle}#{name}#")
    return out


def write_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8") -> int:
    """Overwrite path with one line per entry. Returns the number of lines written."""
    path = Path(path)
    count = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, errors="surrogateescape", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                count += 1
    except (OSError, LookupError) as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    return count
