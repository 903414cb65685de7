# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Rewrite existing lines from profile entries using a line template.

Unlike :class:`line_patch.keyed.KeyedLineUpdater` this never appends: an
entry whose key starts no line in the file is skipped with a warning.
"""

from __future__ import annotations

import collections.abc
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from . import matching
from .errors import LinePatchError, PathLike
from .models import KeyValueEntry, MatchScope, PatchResult
from .textfile import DEFAULT_BACKUP_SUFFIX, DEFAULT_ENCODING, backup_file, read_lines, write_lines

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "{key}={value}"

Entries = Union[Mapping[str, str], Sequence[KeyValueEntry]]


def as_entries(entries: Entries) -> List[KeyValueEntry]:
    if isinstance(entries, collections.abc.Mapping):
        return [KeyValueEntry(key, value) for key, value in entries.items()]
    return list(entries)


def render_line(template: str, key: str, value: str) -> str:
    # Plain substitution; any other braces in the template stay literal.
    return template.replace("{key}", key).replace("{value}", value)


@dataclass
class ProfileOptions:
    template: str = DEFAULT_TEMPLATE
    case_sensitive: bool = False
    scope: MatchScope = MatchScope.FIRST_ONLY
    backup: bool = False
    backup_suffix: str = DEFAULT_BACKUP_SUFFIX
    dry_run: bool = False
    encoding: str = DEFAULT_ENCODING


@dataclass
class BatchReport:
    results: List[PatchResult] = field(default_factory=list)
    failures: List[Tuple[Path, LinePatchError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def changed(self) -> List[PatchResult]:
        return [result for result in self.results if result.changed]


class ProfilePatcher:
    def __init__(self, options: Optional[ProfileOptions] = None) -> None:
        self.options = options or ProfileOptions()

    def apply_lines(
        self, lines: List[str], entries: Entries, result: PatchResult
    ) -> None:
        opts = self.options
        entries = as_entries(entries)
        if any(not entry.key.strip() for entry in entries):
            raise ValueError("keys must be non-empty")
        for entry in entries:
            pattern = matching.key_prefix_pattern(entry.key, opts.case_sensitive)
            hits = matching.scan(lines, lambda line: pattern.match(line) is not None, opts.scope)
            if not hits:
                logger.warning("%s: no line starts with '%s', skipped", result.path, entry.key)
                result.skipped_keys.append(entry.key)
                continue
            rendered = render_line(opts.template, entry.key, entry.value)
            for index in hits:
                if lines[index] == rendered:
                    continue
                logger.debug(
                    "%s: line %d %r -> %r", result.path, index + 1, lines[index], rendered
                )
                lines[index] = rendered
                result.replaced_indices.add(index)
        result.changed = bool(result.replaced_indices)

    def apply(self, file_path: PathLike, entries: Entries) -> PatchResult:
        opts = self.options
        path = Path(file_path)
        lines, bom = read_lines(path, opts.encoding)
        result = PatchResult(path=path, dry_run=opts.dry_run)
        self.apply_lines(lines, entries, result)

        if not result.changed:
            logger.info("%s: no changes needed", path)
            return result
        if opts.dry_run:
            logger.info("%s", result.summary())
            return result

        if opts.backup:
            result.backup_path = backup_file(path, opts.backup_suffix)
        write_lines(path, lines, opts.encoding, bom)
        logger.info("%s", result.summary())
        return result

    def apply_many(
        self, paths: Iterable[PathLike], entries: Entries
    ) -> BatchReport:
        """Patch each file on its own; a failure is recorded and the next file still runs."""
        report = BatchReport()
        for file_path in paths:
            try:
                report.results.append(self.apply(file_path, entries))
            except LinePatchError as exc:
                logger.error("%s", exc)
                report.failures.append((Path(file_path), exc))
        return report
