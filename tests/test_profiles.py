# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import json

import pytest

from line_patch import (
    KeyValueEntry,
    OverrideContext,
    PatchFileNotFoundError,
    ProfileNotFoundError,
    ProfileParseError,
    flatten_entries,
    load_profile,
    load_profile_document,
    resolve_overrides,
    select_profile,
)
from line_patch.config import default_config_path, default_pattern, discover_targets
from line_patch.profiles import list_profiles

DOCUMENT = {
    "competitive": {
        "global": [{"key": "FontScale", "value": "1.0"}],
        "profile": [
            {"key": "TargetFPS", "value": 144.0},
            {"key": "VSync", "value": False},
        ],
    },
    "quiet": {"profile": [{"key": "TargetFPS", "value": "60"}]},
}


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(DOCUMENT))
    return path


def test_global_entries_come_first(config):
    entries = select_profile(load_profile_document(config), "competitive")

    assert entries == [
        KeyValueEntry("FontScale", "1.0"),
        KeyValueEntry("TargetFPS", "144.0"),
        KeyValueEntry("VSync", "false"),
    ]


def test_global_entries_can_be_suppressed(config):
    assert load_profile(config, "competitive", include_global=False) == {
        "TargetFPS": "144.0",
        "VSync": "false",
    }


def test_profile_without_global_section(config):
    assert load_profile(config, "quiet") == {"TargetFPS": "60"}


def test_list_profiles(config):
    assert list_profiles(load_profile_document(config)) == ["competitive", "quiet"]


def test_unknown_profile(config):
    with pytest.raises(ProfileNotFoundError) as excinfo:
        load_profile(config, "casual")

    assert isinstance(excinfo.value, KeyError)
    assert "casual" in str(excinfo.value)
    assert excinfo.value.profile == "casual"


def test_missing_config(tmp_path):
    with pytest.raises(PatchFileNotFoundError):
        load_profile_document(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[]",
        json.dumps({"p": []}),
        json.dumps({"p": {"profile": {"key": "A", "value": "1"}}}),
        json.dumps({"p": {"profile": [{"key": "A"}]}}),
        json.dumps({"p": {"global": [{"key": "", "value": "1"}]}}),
        json.dumps({"p": {"profile": [{"key": "A", "value": [1]}]}}),
    ],
)
def test_malformed_documents(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text)

    with pytest.raises(ProfileParseError) as excinfo:
        load_profile(path, "p")

    assert isinstance(excinfo.value, ValueError)


def test_flatten_keeps_first_position_and_last_value():
    entries = [KeyValueEntry("A", "1"), KeyValueEntry("B", "2"), KeyValueEntry("A", "3")]

    flattened = flatten_entries(entries)

    assert list(flattened.items()) == [("A", "3"), ("B", "2")]


def test_override_context_from_environ():
    context = OverrideContext.from_environ(
        {"LINE_PATCH_OVERRIDE_VALUE": "75", "LINE_PATCH_TERMINATING": "Yes"}
    )

    assert context == OverrideContext(key="TargetFPS", value="75", terminating=True)
    assert not context.active
    assert OverrideContext.from_environ({}) == OverrideContext()


def test_resolve_overrides_substitutes_value():
    base = {"FontScale": "1.0", "targetfps": "144.0"}

    resolved = resolve_overrides(base, OverrideContext(value="75"))

    assert resolved == {"FontScale": "1.0", "targetfps": "75"}
    assert base["targetfps"] == "144.0"


def test_resolve_overrides_adds_missing_key():
    resolved = resolve_overrides({"A": "1"}, OverrideContext(key="B", value="2"))

    assert list(resolved.items()) == [("A", "1"), ("B", "2")]


def test_terminating_keeps_profile_value():
    base = {"TargetFPS": "144.0"}

    assert resolve_overrides(base, OverrideContext(value="75", terminating=True)) == base


def test_discover_targets(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "b" / "SpecialK.ini").write_text("")
    (tmp_path / "a" / "SpecialK.ini").write_text("")
    (tmp_path / "a" / "notes.txt").write_text("")
    (tmp_path / "dir.ini").mkdir()

    assert discover_targets(tmp_path) == [
        tmp_path / "a" / "SpecialK.ini",
        tmp_path / "b" / "SpecialK.ini",
    ]
    assert discover_targets(tmp_path, "*.txt") == [tmp_path / "a" / "notes.txt"]


def test_discover_targets_missing_root(tmp_path):
    with pytest.raises(PatchFileNotFoundError):
        discover_targets(tmp_path / "nowhere")


def test_environment_defaults(tmp_path):
    environ = {"LINE_PATCH_CONFIG": str(tmp_path / "p.json"), "LINE_PATCH_PATTERN": "*.cfg"}

    assert default_config_path(environ) == tmp_path / "p.json"
    assert default_pattern(environ) == "*.cfg"
    assert default_pattern({}) == "*.ini"
