# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Line matching policies.

Every search is a single top-to-bottom pass and the first matching index wins.
Callers that want every hit use :func:`scan` with ``MatchScope.ALL``.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from .models import MatchPolicy, MatchScope

LinePredicate = Callable[[str], bool]


def exact_key_pattern(key: str) -> Pattern[str]:
    # Active or commented-out assignment: "  ; Key = ..." / "#Key=..." / "Key=..."
    return re.compile(r"^[\s;#]*" + re.escape(key) + r"\s*=", re.IGNORECASE)


def key_prefix_pattern(key: str, case_sensitive: bool = False) -> Pattern[str]:
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile("^" + re.escape(key) + r"(?!\w)", flags)


def scan(
    lines: Sequence[str],
    predicate: LinePredicate,
    scope: MatchScope = MatchScope.FIRST_ONLY,
) -> List[int]:
    hits: List[int] = []
    for index, line in enumerate(lines):
        if predicate(line):
            hits.append(index)
            if scope is MatchScope.FIRST_ONLY:
                break
    return hits


def find_first(lines: Sequence[str], predicate: LinePredicate) -> Optional[int]:
    hits = scan(lines, predicate, MatchScope.FIRST_ONLY)
    return hits[0] if hits else None


def find_exact(lines: Sequence[str], key: str) -> Optional[int]:
    pattern = exact_key_pattern(key)
    return find_first(lines, lambda line: pattern.match(line) is not None)


def find_partial(lines: Sequence[str], key: str) -> Optional[int]:
    needle = key.lower()
    return find_first(lines, lambda line: needle in line.lower())


def find_key_line(lines: Sequence[str], key: str) -> Tuple[Optional[int], Optional[MatchPolicy]]:
    """Locate the line holding *key*: exact assignment first, then any substring hit."""
    index = find_exact(lines, key)
    if index is not None:
        return index, MatchPolicy.EXACT_KEY_PREFIX
    index = find_partial(lines, key)
    if index is not None:
        return index, MatchPolicy.PARTIAL_SUBSTRING
    return None, None


def line_has_words(
    line: str,
    words: Sequence[str],
    policy: MatchPolicy = MatchPolicy.ALL_WORDS,
    case_sensitive: bool = False,
) -> bool:
    if policy not in (MatchPolicy.ALL_WORDS, MatchPolicy.ANY_WORD):
        raise ValueError(f"word matching does not support {policy.name}")
    haystack = line if case_sensitive else line.lower()
    present = (
        (word if case_sensitive else word.lower()) in haystack for word in words
    )
    if policy is MatchPolicy.ALL_WORDS:
        return all(present)
    return any(present)
