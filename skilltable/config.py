# -*- coding: utf-8 -*-
"""Config loader: CLI flags > environment > conf/settings.ini > defaults."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from skilltable.extractors import DEFAULT_MARKER, DEFAULT_NAME_FIELD

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SkillTableConfig",
    "load_ini",
    "resolve_config",
]

DEFAULT_CONFIG_PATH = Path("conf") / "settings.ini"

DEFAULT_SKILL_ID = "skillid.lub"
DEFAULT_SKILL_INFO = "skillinfolist.lub"
DEFAULT_ID_HANDLE_OUT = "SKILL_id_handle.txt"
DEFAULT_NAME_TABLE_OUT = "skillnametable.txt"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class SkillTableConfig:
    skill_id_path: Path = Path(DEFAULT_SKILL_ID)
    skill_info_path: Path = Path(DEFAULT_SKILL_INFO)
    id_handle_out: Path = Path(DEFAULT_ID_HANDLE_OUT)
    name_table_out: Path = Path(DEFAULT_NAME_TABLE_OUT)
    encoding: str = DEFAULT_ENCODING
    marker: str = DEFAULT_MARKER
    name_field: str = DEFAULT_NAME_FIELD


def _expand(val: Optional[str]) -> Optional[str]:
    if not val:
        return None
    return os.path.expanduser(val.strip())


def _cfg_get(cfg: configparser.ConfigParser, section: str, key: str) -> Optional[str]:
    try:
        val = cfg.get(section, key, fallback="").strip()
    except configparser.Error:
        val = ""
    return val or None


def load_ini(path: Path, required: bool = False) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if not path.exists():
        if required:
            raise SystemExit(f"Missing config: {path}")
        return cfg
    cfg.read(path, encoding="utf-8")
    return cfg


def resolve_config(
    *,
    config_path: Optional[Path] = None,
    skill_id_path: Optional[str] = None,
    skill_info_path: Optional[str] = None,
    id_handle_out: Optional[str] = None,
    name_table_out: Optional[str] = None,
    encoding: Optional[str] = None,
) -> SkillTableConfig:
    """
    Resolve run settings. An explicit config_path must exist; the default
    conf/settings.ini is optional and plain defaults apply without it.
    """
    if config_path is not None:
        cfg = load_ini(Path(config_path), required=True)
    else:
        cfg = load_ini(DEFAULT_CONFIG_PATH)

    skill_id_path = skill_id_path or os.environ.get("SKILLID_LUB") or _cfg_get(cfg, "PATHS", "SKILLID_LUB")
    skill_info_path = (
        skill_info_path or os.environ.get("SKILLINFOLIST_LUB") or _cfg_get(cfg, "PATHS", "SKILLINFOLIST_LUB")
    )
    id_handle_out = id_handle_out or os.environ.get("ID_HANDLE_TXT") or _cfg_get(cfg, "OUTPUT", "ID_HANDLE_TXT")
    name_table_out = name_table_out or os.environ.get("NAME_TABLE_TXT") or _cfg_get(cfg, "OUTPUT", "NAME_TABLE_TXT")
    encoding = encoding or os.environ.get("SKILLTABLE_ENCODING") or _cfg_get(cfg, "PARSE", "ENCODING")
    marker = _cfg_get(cfg, "PARSE", "MARKER")
    name_field = _cfg_get(cfg, "PARSE", "NAME_FIELD")

    return SkillTableConfig(
        skill_id_path=Path(_expand(skill_id_path) or DEFAULT_SKILL_ID),
        skill_info_path=Path(_expand(skill_info_path) or DEFAULT_SKILL_INFO),
        id_handle_out=Path(_expand(id_handle_out) or DEFAULT_ID_HANDLE_OUT),
        name_table_out=Path(_expand(name_table_out) or DEFAULT_NAME_TABLE_OUT),
        encoding=encoding or DEFAULT_ENCODING,
        marker=marker or DEFAULT_MARKER,
        name_field=name_field or DEFAULT_NAME_FIELD,
    )
