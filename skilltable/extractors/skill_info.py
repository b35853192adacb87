# -*- coding: utf-8 -*-
"""skillinfolist.lub record extractor."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterator, Optional

from skilltable.extractors.base import BaseExtractor
from skilltable.lua import _WS, find_field_string, find_matching
from skilltable.models import HandleIdMap, SkillRecord

__all__ = ["DEFAULT_NAME_FIELD", "SkillInfoExtractor", "resolve_record_key"]

logger = logging.getLogger(__name__)

DEFAULT_NAME_FIELD = "SkillName"

_DIGITS_RE = re.compile(r"^[0-9]+$")
_SPACE_RE = re.compile(r"\s+")


def resolve_record_key(key: str, handle_ids: HandleIdMap) -> Optional[int]:
    """
    Map a record key to a skill ID.

    - `[123]`              -> 123
    - `[SKID.NV_BASIC]`    -> handle after the last dot, looked up in handle_ids
    - `[NV_BASIC]`         -> looked up as is
    Negative IDs count as unresolved.
    """
    key = (key or "").strip(_WS)
    if not key:
        return None
    if _DIGITS_RE.match(key):
        return int(key, 10)

    handle = _SPACE_RE.sub("", key.rsplit(".", 1)[-1])
    if not handle:
        return None
    sid = handle_ids.resolve(handle)
    if sid is None or sid < 0:
        return None
    return sid


class SkillInfoExtractor(BaseExtractor):
    """
    Walk `[KEY] = { ... }` records and collect their display names.

    Records with no `=`/`{` after the key are skipped. An unbalanced `{` ends
    the walk; records seen before it are kept.
    """

    def __init__(self, content: str, path: Optional[str] = None, name_field: str = DEFAULT_NAME_FIELD):
        super().__init__(content, path)
        self.name_field = name_field or DEFAULT_NAME_FIELD

    def iter_records(self, handle_ids: HandleIdMap) -> Iterator[SkillRecord]:
        text = self.clean
        i = 0
        while True:
            lb = text.find("[", i)
            if lb == -1:
                return
            rb = text.find("]", lb + 1)
            if rb == -1:
                return
            key = text[lb + 1 : rb].strip(_WS)

            eq = text.find("=", rb + 1)
            if eq == -1:
                i = rb + 1
                continue
            ob = text.find("{", eq + 1)
            if ob == -1:
                i = rb + 1
                continue

            cb = find_matching(text, ob)
            if cb is None:
                logger.debug("%s: unbalanced record at offset %d, stopping", self.label, ob)
                return

            body = text[ob + 1 : cb]
            yield SkillRecord(
                key=key,
                body=body,
                skill_id=resolve_record_key(key, handle_ids),
                name=find_field_string(body, self.name_field),
            )
            i = cb + 1

    def parse(self, handle_ids: HandleIdMap) -> Dict[int, str]:
        names: Dict[int, str] = {}
        seen = 0
        for rec in self.iter_records(handle_ids):
            seen += 1
            if rec.skill_id is None or not rec.name:
                continue
            names[rec.skill_id] = rec.name
        logger.info("%s: %d records, %d named", self.label, seen, len(names))
        return names
