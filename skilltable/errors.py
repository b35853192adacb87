# -*- coding: utf-8 -*-
"""Errors surfaced to the CLI."""

from __future__ import annotations

__all__ = ["OutputError", "SkillTableError", "SourceError"]


class SkillTableError(Exception):
    pass


class SourceError(SkillTableError):
    """Required source is missing, unreadable, or has no usable table."""


class OutputError(SkillTableError):
    """Output file could not be opened or written."""
