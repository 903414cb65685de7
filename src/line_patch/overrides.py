# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Environment-driven value overrides, resolved before any file is touched."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

OVERRIDE_KEY_VAR = "LINE_PATCH_OVERRIDE_KEY"
OVERRIDE_VALUE_VAR = "LINE_PATCH_OVERRIDE_VALUE"
TERMINATING_VAR = "LINE_PATCH_TERMINATING"
DEFAULT_OVERRIDE_KEY = "TargetFPS"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class OverrideContext:
    key: str = DEFAULT_OVERRIDE_KEY
    value: Optional[str] = None
    terminating: bool = False

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "OverrideContext":
        env = os.environ if environ is None else environ
        value = env.get(OVERRIDE_VALUE_VAR)
        return cls(
            key=env.get(OVERRIDE_KEY_VAR) or DEFAULT_OVERRIDE_KEY,
            value=value if value else None,
            terminating=env.get(TERMINATING_VAR, "").strip().lower() in TRUTHY,
        )

    @property
    def active(self) -> bool:
        return self.value is not None and not self.terminating


def resolve_overrides(base: Mapping[str, str], context: OverrideContext) -> Dict[str, str]:
    """Return a copy of *base* with the override applied.

    While the launching process is terminating the override is dropped, so the
    profile's own value is written back.
    """
    resolved = dict(base)
    if not context.active:
        return resolved
    # Keys match case-insensitively, so reuse the spelling already present.
    key = next((k for k in resolved if k.lower() == context.key.lower()), context.key)
    resolved[key] = context.value  # type: ignore[assignment]
    return resolved
