# -*- coding: utf-8 -*-
"""Skill ID / name table extraction from Lua .lub data files."""

from skilltable.config import SkillTableConfig, resolve_config
from skilltable.errors import OutputError, SkillTableError, SourceError
from skilltable.extractors import SkillIdExtractor, SkillInfoExtractor, resolve_record_key
from skilltable.models import HandleIdMap, SkillRecord
from skilltable.pipeline import BuildResult, build_tables

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "HandleIdMap",
    "OutputError",
    "SkillIdExtractor",
    "SkillInfoExtractor",
    "SkillRecord",
    "SkillTableConfig",
    "SkillTableError",
    "SourceError",
    "build_tables",
    "resolve_config",
    "resolve_record_key",
]
