#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Replace the line (or every line) containing a set of words."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from line_patch import LinePatchError, MatchPolicy, MatchScope, ReplaceOptions, WordMatchLineReplacer
from line_patch.log import configure_logging

PROG = "replace-line"

logger = logging.getLogger(PROG)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description=__doc__)
    parser.add_argument("file", type=Path, help="Text file to patch")
    parser.add_argument(
        "-w",
        "--word",
        dest="words",
        action="append",
        required=True,
        help="Word the line must contain (repeatable)",
    )
    parser.add_argument("-r", "--replacement", required=True, help="Literal replacement line")
    parser.add_argument("--any", action="store_true", help="Match lines containing any word (default: all)")
    parser.add_argument("--all", action="store_true", help="Replace every matching line (default: first)")
    parser.add_argument("--case-sensitive", action="store_true")
    parser.add_argument("--backup", action="store_true", help="Copy the file aside before writing")
    parser.add_argument("--backup-suffix", default=".bak")
    parser.add_argument("--dry-run", action="store_true", help="Report matches without writing")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> ReplaceOptions:
    return ReplaceOptions(
        match_mode=MatchPolicy.ANY_WORD if args.any else MatchPolicy.ALL_WORDS,
        scope=MatchScope.ALL if args.all else MatchScope.FIRST_ONLY,
        case_sensitive=args.case_sensitive,
        backup=args.backup,
        backup_suffix=args.backup_suffix,
        dry_run=args.dry_run,
        encoding=args.encoding,
    )


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    configure_logging(PROG, verbose=args.verbose)
    try:
        WordMatchLineReplacer().replace(args.file, args.words, args.replacement, build_options(args))
    except LinePatchError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via callers
    sys.exit(main(sys.argv[1:]))
