# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Environment-backed defaults and target file discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional

from .errors import PatchFileNotFoundError, PathLike

CONFIG_VAR = "LINE_PATCH_CONFIG"
ROOT_VAR = "LINE_PATCH_ROOT"
PATTERN_VAR = "LINE_PATCH_PATTERN"

DEFAULT_CONFIG_NAME = "profiles.json"
DEFAULT_PATTERN = "*.ini"


def _env(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    configured = _env(environ).get(CONFIG_VAR)
    return Path(configured).expanduser() if configured else Path.cwd() / DEFAULT_CONFIG_NAME


def default_targets_root(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    configured = _env(environ).get(ROOT_VAR)
    return Path(configured).expanduser() if configured else None


def default_pattern(environ: Optional[Mapping[str, str]] = None) -> str:
    return _env(environ).get(PATTERN_VAR) or DEFAULT_PATTERN


def discover_targets(root: PathLike, pattern: str = DEFAULT_PATTERN) -> List[Path]:
    base = Path(root)
    if not base.is_dir():
        raise PatchFileNotFoundError(base, "target directory")
    return sorted(path for path in base.rglob(pattern) if path.is_file())
