# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Value types shared by the updaters."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set


class MatchPolicy(enum.Enum):
    EXACT_KEY_PREFIX = "exact"
    PARTIAL_SUBSTRING = "partial"
    ALL_WORDS = "all"
    ANY_WORD = "any"


class MatchScope(enum.Enum):
    FIRST_ONLY = "first"
    ALL = "all"


@dataclass(frozen=True)
class KeyValueEntry:
    key: str
    value: str

    def as_line(self) -> str:
        return f"{self.key}={self.value}"


@dataclass
class PatchResult:
    path: Path
    changed: bool = False
    replaced_indices: Set[int] = field(default_factory=set)
    appended_keys: List[str] = field(default_factory=list)
    skipped_keys: List[str] = field(default_factory=list)
    backup_path: Optional[Path] = None
    dry_run: bool = False

    def summary(self) -> str:
        if not self.changed:
            return f"{self.path}: no changes"
        parts = []
        if self.replaced_indices:
            parts.append(f"{len(self.replaced_indices)} line(s) replaced")
        if self.appended_keys:
            parts.append(f"{len(self.appended_keys)} line(s) appended")
        verb = "would change" if self.dry_run else "updated"
        return f"{self.path}: {verb} ({', '.join(parts)})"
