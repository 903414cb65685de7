#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Apply a named JSON profile to existing lines of one or more text files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from line_patch import (
    LinePatchError,
    MatchScope,
    OverrideContext,
    ProfileOptions,
    ProfilePatcher,
    resolve_overrides,
)
from line_patch.config import default_config_path, default_pattern, default_targets_root, discover_targets
from line_patch.log import configure_logging
from line_patch.profile_mode import DEFAULT_TEMPLATE
from line_patch.profiles import flatten_entries, list_profiles, load_profile_document, select_profile

PROG = "apply-profile"

logger = logging.getLogger(PROG)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description=__doc__)
    parser.add_argument("-p", "--profile", help="Profile name inside the config document")
    parser.add_argument("-c", "--config", type=Path, default=default_config_path())
    targets = parser.add_mutually_exclusive_group()
    targets.add_argument("-t", "--target", type=Path, action="append", help="File to patch (repeatable)")
    targets.add_argument("--root", type=Path, default=default_targets_root(), help="Directory searched for targets")
    parser.add_argument("--pattern", default=default_pattern(), help="Glob used under --root")
    parser.add_argument("--no-global", action="store_true", help="Skip the profile's global entries")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Line template with {key} and {value}")
    parser.add_argument("--all-matches", action="store_true", help="Rewrite every line starting with a key")
    parser.add_argument("--case-sensitive", action="store_true")
    parser.add_argument("--backup", action="store_true", help="Copy each file aside before writing")
    parser.add_argument("--backup-suffix", default=".bak")
    parser.add_argument("--dry-run", action="store_true", help="Report changes without writing")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--list", action="store_true", help="List profile names and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-q", "--quiet", action="store_true")
    args = parser.parse_args(argv)
    if not args.list:
        if not args.profile:
            parser.error("--profile is required")
        if not args.target and args.root is None:
            parser.error("one of --target or --root is required")
    return args


def resolve_targets(args: argparse.Namespace) -> List[Path]:
    if args.target:
        return list(args.target)
    targets = discover_targets(args.root, args.pattern)
    if not targets:
        logger.warning("no files matching %s under %s", args.pattern, args.root)
    return targets


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    configure_logging(PROG, verbose=args.verbose, quiet=args.quiet)

    try:
        document = load_profile_document(args.config)
        if args.list:
            for name in list_profiles(document):
                print(name)
            return 0
        entries = select_profile(document, args.profile, not args.no_global, args.config)
        mapping = resolve_overrides(flatten_entries(entries), OverrideContext.from_environ())
        targets = resolve_targets(args)
    except LinePatchError as exc:
        logger.error("%s", exc)
        return 1

    patcher = ProfilePatcher(
        ProfileOptions(
            template=args.template,
            case_sensitive=args.case_sensitive,
            scope=MatchScope.ALL if args.all_matches else MatchScope.FIRST_ONLY,
            backup=args.backup,
            backup_suffix=args.backup_suffix,
            dry_run=args.dry_run,
            encoding=args.encoding,
        )
    )
    report = patcher.apply_many(targets, mapping)
    logger.info(
        "%d file(s) processed, %d changed, %d failed",
        len(report.results) + len(report.failures),
        len(report.changed),
        len(report.failures),
    )
    return 0 if report.ok else 1


if __name__ == "__main__":  # pragma: no cover - exercised via callers
    sys.exit(main(sys.argv[1:]))
