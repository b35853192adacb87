# -*- coding: utf-8 -*-
"""Brace matching helpers for Lua tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "BraceBlock",
    "find_brace_block",
    "find_matching",
]


@dataclass(frozen=True)
class BraceBlock:
    """A balanced { ... } span. body excludes the braces."""

    open_idx: int
    close_idx: int
    body: str


def find_matching(text: str, open_idx: int, open_ch: str = "{", close_ch: str = "}") -> Optional[int]:
    """Find the closing bracket for open_ch at open_idx by depth counting. None if never closed."""
    n = len(text)
    if open_idx < 0 or open_idx >= n or text[open_idx] != open_ch:
        return None

    depth = 0
    for i in range(open_idx, n):
        ch = text[i]
        if ch == open_ch:
            depth += 1
        elif ch == close_ch:
            depth -= 1
            if depth == 0:
                return i
    return None


def find_brace_block(text: str, start: int = 0) -> Optional[BraceBlock]:
    """First `{` at or after start, paired with its matching `}`."""
    if not text:
        return None
    open_idx = text.find("{", max(start, 0))
    if open_idx == -1:
        return None
    close_idx = find_matching(text, open_idx)
    if close_idx is None:
        return None
    return BraceBlock(open_idx=open_idx, close_idx=close_idx, body=text[open_idx + 1 : close_idx])
