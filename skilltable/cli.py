#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""skilltable CLI: skillid.lub + skillinfolist.lub -> SKILL_id_handle.txt + skillnametable.txt."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from skilltable.config import resolve_config
from skilltable.errors import SkillTableError
from skilltable.pipeline import load_handle_ids, load_skill_names, write_id_handle, write_name_table

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Extract skill ID/handle and skill name tables from .lub files.")
    p.add_argument("--config", default=None, help="Path to settings.ini (default: conf/settings.ini if present)")
    p.add_argument("--skill-id", default=None, help="skillid.lub path")
    p.add_argument("--skill-info", default=None, help="skillinfolist.lub path")
    p.add_argument("--id-handle-out", default=None, help="SKILL_id_handle.txt path")
    p.add_argument("--name-table-out", default=None, help="skillnametable.txt path")
    p.add_argument("--encoding", default=None, help="Source/output text encoding (default: utf-8)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    args = p.parse_args(list(argv) if argv is not None else None)
    _setup_logging(args.verbose)

    cfg = resolve_config(
        config_path=Path(args.config) if args.config else None,
        skill_id_path=args.skill_id,
        skill_info_path=args.skill_info,
        id_handle_out=args.id_handle_out,
        name_table_out=args.name_table_out,
        encoding=args.encoding,
    )

    try:
        handle_ids = load_handle_ids(cfg)
    except SkillTableError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1

    try:
        wrote = write_id_handle(cfg, handle_ids)
    except SkillTableError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1
    console.print(f"Wrote {wrote} lines to {escape(str(cfg.id_handle_out))}", highlight=False, soft_wrap=True)

    names, warning = load_skill_names(cfg, handle_ids)
    if warning:
        err_console.print(f"[yellow]Warning: {escape(warning)}[/yellow]", highlight=False, soft_wrap=True)

    try:
        wrote = write_name_table(cfg, handle_ids, names)
    except SkillTableError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1
    console.print(f"Wrote {wrote} lines to {escape(str(cfg.name_table_out))}", highlight=False, soft_wrap=True)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
