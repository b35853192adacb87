# -*- coding: utf-8 -*-
"""Base classes for .lub extractors."""

from __future__ import annotations

from typing import Optional

from skilltable.lua import strip_lua_comments

__all__ = ["BaseExtractor"]


class BaseExtractor:
    def __init__(self, content: str, path: Optional[str] = None):
        self.path = path
        self.content = content or ""
        self.clean = strip_lua_comments(self.content)

    @property
    def label(self) -> str:
        return self.path or "<memory>"
