# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Update or append KEY=value lines inside a text file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Set, Tuple

from . import matching
from .errors import PathLike
from .models import KeyValueEntry, PatchResult
from .textfile import DEFAULT_BACKUP_SUFFIX, DEFAULT_ENCODING, backup_file, read_lines, write_lines

logger = logging.getLogger(__name__)


def update_lines(
    lines: List[str], entries: Mapping[str, str]
) -> Tuple[Set[int], List[str]]:
    """Apply *entries* to *lines* in place.

    Returns the indices rewritten in place and the keys that had to be
    appended. Keys are handled in mapping order against the same list, so a
    later key sees what an earlier one wrote.
    """
    if any(not key.strip() for key in entries):
        raise ValueError("keys must be non-empty")
    replaced: Set[int] = set()
    appended: List[str] = []
    for key, value in entries.items():
        desired = KeyValueEntry(key, value).as_line()
        index, policy = matching.find_key_line(lines, key)
        if index is None:
            lines.append(desired)
            appended.append(key)
            logger.debug("%s: no line found, appending", key)
            continue
        if lines[index] == desired:
            logger.debug("%s: line %d already up to date", key, index + 1)
            continue
        logger.debug(
            "%s: %s match on line %d (%r)", key, policy.value, index + 1, lines[index]
        )
        lines[index] = desired
        replaced.add(index)
    return replaced, appended


class KeyedLineUpdater:
    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        backup: bool = False,
        backup_suffix: str = DEFAULT_BACKUP_SUFFIX,
        dry_run: bool = False,
    ) -> None:
        self.encoding = encoding
        self.backup = backup
        self.backup_suffix = backup_suffix
        self.dry_run = dry_run

    def update(self, file_path: PathLike, entries: Mapping[str, str]) -> PatchResult:
        path = Path(file_path)
        lines, bom = read_lines(path, self.encoding)
        replaced, appended = update_lines(lines, entries)

        result = PatchResult(
            path=path,
            changed=bool(replaced or appended),
            replaced_indices=replaced,
            appended_keys=appended,
            dry_run=self.dry_run,
        )
        if not result.changed:
            logger.info("%s: no changes needed", path)
            return result
        if self.dry_run:
            logger.info("%s", result.summary())
            return result

        if self.backup:
            result.backup_path = backup_file(path, self.backup_suffix)
        write_lines(path, lines, self.encoding, bom)
        logger.info("%s", result.summary())
        return result


def update_keys(file_path: PathLike, entries: Mapping[str, str]) -> PatchResult:
    return KeyedLineUpdater().update(file_path, entries)
