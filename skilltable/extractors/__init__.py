# -*- coding: utf-8 -*-
"""Extractors for the skill .lub sources."""

from skilltable.extractors.base import BaseExtractor
from skilltable.extractors.skill_id import DEFAULT_MARKER, SkillIdExtractor
from skilltable.extractors.skill_info import DEFAULT_NAME_FIELD, SkillInfoExtractor, resolve_record_key

__all__ = [
    "BaseExtractor",
    "DEFAULT_MARKER",
    "DEFAULT_NAME_FIELD",
    "SkillIdExtractor",
    "SkillInfoExtractor",
    "resolve_record_key",
]
