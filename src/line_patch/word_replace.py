# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Replace whole lines that contain a set of words."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from . import matching
from .errors import PathLike
from .models import MatchPolicy, MatchScope, PatchResult
from .textfile import DEFAULT_BACKUP_SUFFIX, DEFAULT_ENCODING, backup_file, read_lines, write_lines

logger = logging.getLogger(__name__)


@dataclass
class ReplaceOptions:
    match_mode: MatchPolicy = MatchPolicy.ALL_WORDS
    scope: MatchScope = MatchScope.FIRST_ONLY
    case_sensitive: bool = False
    backup: bool = False
    backup_suffix: str = DEFAULT_BACKUP_SUFFIX
    dry_run: bool = False
    encoding: str = DEFAULT_ENCODING


class WordMatchLineReplacer:
    """Find lines containing the given words and overwrite them wholesale.

    With ``ALL_WORDS`` every word must occur in the line as a substring, with
    ``ANY_WORD`` one is enough. ``FIRST_ONLY`` stops at the first hit, ``ALL``
    rewrites every hit. A backup, when requested, is taken before anything is
    written and stays on disk even if the write then fails.
    """

    def replace(
        self,
        file_path: PathLike,
        words: Sequence[str],
        replacement: str,
        options: Optional[ReplaceOptions] = None,
    ) -> PatchResult:
        opts = options or ReplaceOptions()
        if not words:
            raise ValueError("at least one word is required")
        if opts.match_mode not in (MatchPolicy.ALL_WORDS, MatchPolicy.ANY_WORD):
            raise ValueError(f"unsupported match mode: {opts.match_mode.name}")

        path = Path(file_path)
        lines, bom = read_lines(path, opts.encoding)
        hits = matching.scan(
            lines,
            lambda line: matching.line_has_words(
                line, words, opts.match_mode, opts.case_sensitive
            ),
            opts.scope,
        )

        result = PatchResult(path=path, dry_run=opts.dry_run)
        if not hits:
            logger.info("%s: no line matches %s, no changes", path, list(words))
            return result

        for index in hits:
            logger.debug("%s: line %d matches: %r", path, index + 1, lines[index])
        result.replaced_indices = {index for index in hits if lines[index] != replacement}
        result.changed = bool(result.replaced_indices)
        if not result.changed:
            logger.info("%s: matching line(s) already up to date", path)
            return result
        if opts.dry_run:
            logger.info("%s", result.summary())
            return result

        if opts.backup:
            result.backup_path = backup_file(path, opts.backup_suffix)
        for index in result.replaced_indices:
            lines[index] = replacement
        write_lines(path, lines, opts.encoding, bom)
        logger.info("%s", result.summary())
        return result
