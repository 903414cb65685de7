# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Load named key/value profiles from a JSON document.

The document maps a profile name to its two entry lists::

    {
      "competitive": {
        "global":  [{"key": "FontScale", "value": "1.0"}],
        "profile": [{"key": "TargetFPS", "value": "144.0"}]
      }
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .errors import PatchFileNotFoundError, PathLike, ProfileNotFoundError, ProfileParseError
from .models import KeyValueEntry

SECTIONS = ("global", "profile")

ProfileDocument = Dict[str, Any]


def load_profile_document(file_path: PathLike) -> ProfileDocument:
    path = Path(file_path)
    if not path.is_file():
        raise PatchFileNotFoundError(path, "profile config")
    try:
        with path.open(encoding="utf-8-sig") as fh:
            document = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ProfileParseError(f"{path}: invalid JSON: {exc}", path) from exc
    if not isinstance(document, dict):
        raise ProfileParseError(f"{path}: top level must be an object of profiles", path)
    return document


def list_profiles(document: ProfileDocument) -> List[str]:
    return sorted(document)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_section(name: str, section: str, raw: Any, source: Any) -> List[KeyValueEntry]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ProfileParseError(f"profile '{name}': '{section}' must be a list", source)
    entries: List[KeyValueEntry] = []
    for index, item in enumerate(raw):
        where = f"profile '{name}': {section}[{index}]"
        if not isinstance(item, dict) or "key" not in item or "value" not in item:
            raise ProfileParseError(f"{where}: expected an object with 'key' and 'value'", source)
        key, value = item["key"], item["value"]
        if not isinstance(key, str) or not key.strip():
            raise ProfileParseError(f"{where}: key must be a non-empty string", source)
        if isinstance(value, (dict, list)) or value is None:
            raise ProfileParseError(f"{where}: value for '{key}' must be a scalar", source)
        entries.append(KeyValueEntry(key, _render_value(value)))
    return entries


def select_profile(
    document: ProfileDocument,
    name: str,
    include_global: bool = True,
    source: Optional[PathLike] = None,
) -> List[KeyValueEntry]:
    """Return the entries of profile *name*, global ones first."""
    if name not in document:
        raise ProfileNotFoundError(name, source)
    body = document[name]
    if not isinstance(body, dict):
        raise ProfileParseError(f"profile '{name}' must be an object", source)

    entries: List[KeyValueEntry] = []
    for section in SECTIONS:
        if section == "global" and not include_global:
            continue
        entries.extend(_parse_section(name, section, body.get(section), source))
    return entries


def flatten_entries(entries: Iterable[KeyValueEntry]) -> Dict[str, str]:
    # A repeated key keeps its first position and takes the last value.
    flattened: Dict[str, str] = {}
    for entry in entries:
        flattened[entry.key] = entry.value
    return flattened


def load_profile(
    file_path: PathLike, name: str, include_global: bool = True
) -> Dict[str, str]:
    document = load_profile_document(file_path)
    return flatten_entries(select_profile(document, name, include_global, file_path))
