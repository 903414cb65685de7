#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Update or append KEY=value lines inside a text file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from line_patch import KeyedLineUpdater, LinePatchError
from line_patch.log import configure_logging

PROG = "update-keys"

logger = logging.getLogger(PROG)


def parse_assignment(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"invalid assignment '{token}', expected KEY=VALUE")
    return key.strip(), value


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description=__doc__)
    parser.add_argument("file", type=Path, help="Text file to patch")
    parser.add_argument(
        "assignments",
        nargs="+",
        type=parse_assignment,
        metavar="KEY=VALUE",
        help="Settings to write, applied in the order given",
    )
    parser.add_argument("--dry-run", action="store_true", help="Report changes without writing")
    parser.add_argument("--backup", action="store_true", help="Copy the file aside before writing")
    parser.add_argument("--backup-suffix", default=".bak")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    configure_logging(PROG, verbose=args.verbose)

    entries: Dict[str, str] = {}
    for key, value in args.assignments:
        entries[key] = value

    updater = KeyedLineUpdater(
        encoding=args.encoding,
        backup=args.backup,
        backup_suffix=args.backup_suffix,
        dry_run=args.dry_run,
    )
    try:
        updater.update(args.file, entries)
    except LinePatchError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via callers
    sys.exit(main(sys.argv[1:]))
