# -*- coding: utf-8 -*-
"""SKID enumeration extractor for skillid.lub."""

from __future__ import annotations

import logging
from typing import Optional

from skilltable.errors import SourceError
from skilltable.extractors.base import BaseExtractor
from skilltable.lua import find_brace_block, parse_table_entries
from skilltable.models import HandleIdMap

__all__ = ["DEFAULT_MARKER", "SkillIdExtractor"]

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "SKID"


class SkillIdExtractor(BaseExtractor):
    """
    Build the handle <-> ID table from `SKID = { NV_BASIC = 1, ... }`.

    The first brace block at or after the marker is taken as the entry list;
    anything between the marker and that `{` is ignored.
    """

    def __init__(self, content: str, path: Optional[str] = None, marker: str = DEFAULT_MARKER):
        super().__init__(content, path)
        self.marker = marker or DEFAULT_MARKER

    def parse(self) -> HandleIdMap:
        pos = self.clean.find(self.marker)
        if pos == -1:
            raise SourceError(f"{self.label}: {self.marker} block missing")

        block = find_brace_block(self.clean, pos)
        if block is None:
            raise SourceError(f"{self.label}: {self.marker} table not found or unbalanced")

        entries = parse_table_entries(block.body)
        if not entries:
            raise SourceError(f"{self.label}: {self.marker} table has no usable entries")

        ids = HandleIdMap.from_entries(entries)
        logger.info("%s: %d entries, %d ids, %d handles", self.label, len(entries), len(ids), len(ids.handle_to_id))
        return ids
