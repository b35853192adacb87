# -*- coding: utf-8 -*-
"""Low-level Lua scanning helpers."""

from __future__ import annotations

from typing import List

__all__ = [
    "_is_alnum",
    "_WS",
    "strip_block_comments",
    "strip_line_comments",
    "strip_lua_comments",
]

_WS = " \t\r\n"

_BLOCK_OPEN = "--[["
_BLOCK_CLOSE = "]]"


def _is_alnum(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z") or ("0" <= ch <= "9")


def strip_block_comments(text: str) -> str:
    """
    Blank out --[[ ... ]] comments.
    Newlines inside a comment are kept, every other character becomes a space.
    An opener without a closer leaves the rest of the text as it is.
    """
    if not text:
        return ""
    n = len(text)
    out: List[str] = []
    i = 0
    while i < n:
        if text.startswith(_BLOCK_OPEN, i):
            end = text.find(_BLOCK_CLOSE, i + len(_BLOCK_OPEN))
            if end == -1:
                out.append(text[i:])
                break
            end += len(_BLOCK_CLOSE)
            out.append("".join("\n" if ch == "\n" else " " for ch in text[i:end]))
            i = end
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def strip_line_comments(text: str) -> str:
    """Drop `--` up to end of line; the comment and its newline become a single newline."""
    if not text:
        return ""
    n = len(text)
    out: List[str] = []
    i = 0
    while i < n:
        if text.startswith("--", i):
            nl = text.find("\n", i + 2)
            out.append("\n")
            i = n if nl == -1 else nl + 1
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def strip_lua_comments(text: str) -> str:
    """
    Remove Lua comments while preserving line breaks (keeps line numbers stable).
    Block comments go first so that `--[[` is not taken for a line comment.
    """
    return strip_line_comments(strip_block_comments(text))
