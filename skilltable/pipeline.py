# -*- coding: utf-8 -*-
"""skilltable pipeline

Responsibilities
- Read skillid.lub / skillinfolist.lub fully into memory.
- Build the handle <-> ID table (required) and the ID -> SkillName table (optional).
- Write SKILL_id_handle.txt and skillnametable.txt.

A missing or broken skillid.lub raises SourceError; a missing skillinfolist.lub
only produces a warning and an empty name table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from skilltable.config import SkillTableConfig
from skilltable.errors import SourceError
from skilltable.extractors import SkillIdExtractor, SkillInfoExtractor
from skilltable.models import HandleIdMap
from skilltable.report import id_handle_lines, name_table_lines, write_lines

__all__ = [
    "BuildResult",
    "build_tables",
    "load_handle_ids",
    "load_skill_names",
    "read_source",
    "write_id_handle",
    "write_name_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    handle_ids: HandleIdMap
    names: Dict[int, str]
    id_handle_count: int
    name_table_count: int
    warnings: List[str] = field(default_factory=list)


def read_source(path: Path, encoding: str = "utf-8") -> Optional[str]:
    if not path.exists() or not path.is_file():
        return None
    try:
        return path.read_text(encoding=encoding, errors="surrogateescape")
    except (OSError, LookupError) as e:
        logger.warning("Cannot read %s: %s", path, e)
        return None


def load_handle_ids(config: SkillTableConfig) -> HandleIdMap:
    path = config.skill_id_path
    text = read_source(path, config.encoding)
    if text is None:
        raise SourceError(f"Couldn't read {path}")
    return SkillIdExtractor(text, str(path), marker=config.marker).parse()


def load_skill_names(config: SkillTableConfig, handle_ids: HandleIdMap) -> Tuple[Dict[int, str], Optional[str]]:
    """Return (names, warning). warning is set when the info list could not be read."""
    path = config.skill_info_path
    text = read_source(path, config.encoding)
    if text is None:
        msg = f"Couldn't read {path}; {config.name_table_out} will be empty."
        logger.warning(msg)
        return {}, msg
    return SkillInfoExtractor(text, str(path), name_field=config.name_field).parse(handle_ids), None


def write_id_handle(config: SkillTableConfig, handle_ids: HandleIdMap) -> int:
    return write_lines(config.id_handle_out, id_handle_lines(handle_ids), config.encoding)


def write_name_table(config: SkillTableConfig, handle_ids: HandleIdMap, names: Dict[int, str]) -> int:
    return write_lines(config.name_table_out, name_table_lines(handle_ids, names), config.encoding)


def build_tables(config: SkillTableConfig) -> BuildResult:
    handle_ids = load_handle_ids(config)
    id_count = write_id_handle(config, handle_ids)

    names, warning = load_skill_names(config, handle_ids)
    name_count = write_name_table(config, handle_ids, names)

    return BuildResult(
        handle_ids=handle_ids,
        names=names,
        id_handle_count=id_count,
        name_table_count=name_count,
        warnings=[warning] if warning else [],
    )
