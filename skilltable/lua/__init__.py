# -*- coding: utf-8 -*-
"""Lua scanning primitives for .lub data tables."""

from skilltable.lua.fields import find_field_string
from skilltable.lua.match import BraceBlock, find_brace_block, find_matching
from skilltable.lua.scan import _WS, _is_alnum, strip_block_comments, strip_line_comments, strip_lua_comments
from skilltable.lua.table import INT64_MAX, INT64_MIN, parse_lua_integer, parse_table_entries, split_entries

__all__ = [
    "BraceBlock",
    "INT64_MAX",
    "INT64_MIN",
    "find_brace_block",
    "find_field_string",
    "find_matching",
    "parse_lua_integer",
    "parse_table_entries",
    "split_entries",
    "strip_block_comments",
    "strip_line_comments",
    "strip_lua_comments",
    "_WS",
    "_is_alnum",
]
