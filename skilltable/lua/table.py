# -*- coding: utf-8 -*-
"""Flat `NAME = NUMBER` table body parsing."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from skilltable.lua.scan import _WS

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "parse_lua_integer",
    "parse_table_entries",
    "split_entries",
]

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)

# strtoll(s, &end, 0): leading space, sign, then 0x.. / 0.. / decimal.
# "0x" without hex digits falls through to the octal branch and reads "0".
_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")


def parse_lua_integer(text: str) -> Optional[int]:
    """
    Parse the leading integer of text with C base-0 rules.
    Trailing characters are ignored ("12abc" -> 12, "08" -> 0). None if no digits.
    """
    m = _INT_RE.match(text or "")
    if not m:
        return None
    sign, hex_digits, oct_digits, dec_digits = m.groups()
    if hex_digits is not None:
        val = int(hex_digits, 16)
    elif oct_digits is not None:
        val = int(oct_digits, 8)
    else:
        val = int(dec_digits, 10)
    if sign == "-":
        val = -val
    return max(INT64_MIN, min(INT64_MAX, val))


def split_entries(body: str) -> List[str]:
    """Split a table body on every comma; chunks are trimmed, empty ones dropped."""
    if not body:
        return []
    parts: List[str] = []
    for chunk in body.split(","):
        chunk = chunk.strip(_WS)
        if chunk:
            parts.append(chunk)
    return parts


def parse_table_entries(body: str) -> List[Tuple[str, int]]:
    """
    Parse `NAME = VALUE` entries of a flat table body (without outer braces).
    Entries without `=`, with an empty side, or with a non-numeric value are skipped.
    """
    out: List[Tuple[str, int]] = []
    for entry in split_entries(body):
        name, eq, val = entry.partition("=")
        if not eq:
            continue
        name = name.strip(_WS)
        val = val.strip(_WS)
        if not name or not val:
            continue

        semi = val.find(";")
        if semi != -1:
            val = val[:semi].strip(_WS)

        num = parse_lua_integer(val)
        if num is None:
            continue
        out.append((name, num))
    return out
