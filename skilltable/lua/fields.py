# -*- coding: utf-8 -*-
"""Field lookup inside Lua table bodies."""

from __future__ import annotations

from skilltable.lua.scan import _is_alnum

__all__ = ["find_field_string"]


def _is_whole_word(body: str, pos: int, length: int) -> bool:
    left_ok = pos == 0 or not _is_alnum(body[pos - 1])
    end = pos + length
    right_ok = end >= len(body) or not _is_alnum(body[end])
    return left_ok and right_ok


def find_field_string(body: str, field: str) -> str:
    """
    Return the quoted value of `field = "value"` in body, or "" when absent.

    Only the first double-quoted string after the `=` counts. If a whole-word
    hit has no quote after its `=`, scanning resumes right after that `=`.
    """
    if not body or not field:
        return ""

    flen = len(field)
    p = 0
    while True:
        p = body.find(field, p)
        if p == -1:
            return ""

        if not _is_whole_word(body, p, flen):
            p += flen
            continue

        eq = body.find("=", p + flen)
        if eq == -1:
            return ""
        q1 = body.find('"', eq + 1)
        if q1 == -1:
            p = eq + 1
            continue
        q2 = body.find('"', q1 + 1)
        if q2 == -1:
            return ""
        return body[q1 + 1 : q2]
