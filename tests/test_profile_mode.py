# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

import logging

import pytest

from line_patch import (
    KeyValueEntry,
    MatchScope,
    ProfileOptions,
    ProfilePatcher,
    ReadFailedError,
    render_line,
)


def patcher(**options):
    return ProfilePatcher(ProfileOptions(**options))


def test_render_line_only_touches_placeholders():
    assert render_line("{key}={value}", "TargetFPS", "60") == "TargetFPS=60"
    assert render_line("{key}: {value} {unit}", "Mode", "Fast") == "Mode: Fast {unit}"
    assert render_line("{value}{value}", "k", "ab") == "abab"


def test_missing_key_is_skipped_with_warning(tmp_path, caplog):
    target = tmp_path / "game.cfg"
    target.write_text("Speed: 1\nModel: A\n")
    before = target.read_bytes()

    with caplog.at_level(logging.WARNING, logger="line_patch.profile_mode"):
        result = patcher(template="{key}: {value}").apply(target, [KeyValueEntry("Mode", "Fast")])

    assert not result.changed
    assert result.skipped_keys == ["Mode"]
    assert target.read_bytes() == before
    assert any("Mode" in record.getMessage() for record in caplog.records)


def test_template_rewrites_existing_line(tmp_path):
    target = tmp_path / "game.cfg"
    target.write_text("Speed: 1\nMode: Slow\n")

    result = patcher(template="{key}: {value}").apply(target, [KeyValueEntry("Mode", "Fast")])

    assert result.changed
    assert result.replaced_indices == {1}
    assert target.read_text() == "Speed: 1\nMode: Fast\n"


def test_prefix_requires_word_boundary(tmp_path):
    target = tmp_path / "SpecialK.ini"
    target.write_text("TargetFPSBackground=30\nTargetFPS=60\n")

    result = patcher().apply(target, {"TargetFPS": "144"})

    assert target.read_text() == "TargetFPSBackground=30\nTargetFPS=144\n"
    assert result.replaced_indices == {1}


def test_prefix_must_start_the_line(tmp_path):
    target = tmp_path / "SpecialK.ini"
    target.write_text("; TargetFPS=60\n")

    result = patcher().apply(target, {"TargetFPS": "144"})

    assert not result.changed
    assert result.skipped_keys == ["TargetFPS"]


def test_case_sensitivity(tmp_path):
    target = tmp_path / "a.ini"
    target.write_text("targetfps=60\n")

    assert patcher(case_sensitive=True).apply(target, {"TargetFPS": "90"}).skipped_keys == ["TargetFPS"]
    assert target.read_text() == "targetfps=60\n"

    patcher().apply(target, {"TargetFPS": "90"})
    assert target.read_text() == "TargetFPS=90\n"


def test_scope_all_rewrites_every_line(tmp_path):
    target = tmp_path / "a.ini"
    target.write_text("[A]\nEnabled=false\n[B]\nEnabled=false\n")

    first = patcher(dry_run=True).apply(target, {"Enabled": "true"})
    every = patcher(scope=MatchScope.ALL).apply(target, {"Enabled": "true"})

    assert first.replaced_indices == {1}
    assert every.replaced_indices == {1, 3}
    assert target.read_text() == "[A]\nEnabled=true\n[B]\nEnabled=true\n"


def test_never_appends_and_is_idempotent(tmp_path):
    target = tmp_path / "a.ini"
    target.write_text("FontScale=2.0\nTargetFPS=60\n")
    entries = [KeyValueEntry("FontScale", "1.0"), KeyValueEntry("TargetFPS", "144"), KeyValueEntry("Extra", "1")]

    first = patcher(backup=True).apply(target, entries)
    second = patcher(backup=True).apply(target, entries)

    assert target.read_text() == "FontScale=1.0\nTargetFPS=144\n"
    assert first.changed and first.backup_path is not None
    assert first.backup_path.read_text() == "FontScale=2.0\nTargetFPS=60\n"
    assert not second.changed
    assert second.skipped_keys == ["Extra"]


def test_apply_many_continues_after_failure(tmp_path):
    good = tmp_path / "good.ini"
    good.write_text("TargetFPS=60\n")
    missing = tmp_path / "missing.ini"
    untouched = tmp_path / "untouched.ini"
    untouched.write_text("Other=1\n")

    report = patcher().apply_many([missing, good, untouched], {"TargetFPS": "120"})

    assert not report.ok
    assert [path for path, _ in report.failures] == [missing]
    assert [result.path for result in report.results] == [good, untouched]
    assert [result.path for result in report.changed] == [good]
    assert good.read_text() == "TargetFPS=120\n"


def test_apply_many_continues_after_undecodable_file(tmp_path):
    bad = tmp_path / "bad.ini"
    bad.write_bytes(b"TargetFPS=60\n\xff\xfe\xfa\n")
    good = tmp_path / "good.ini"
    good.write_text("TargetFPS=60\n")

    report = patcher().apply_many([bad, good], {"TargetFPS": "144"})

    assert len(report.failures) == 1
    path, error = report.failures[0]
    assert path == bad
    assert isinstance(error, ReadFailedError)
    assert error.path == bad
    assert bad.read_bytes() == b"TargetFPS=60\n\xff\xfe\xfa\n"
    assert good.read_text() == "TargetFPS=144\n"


def test_byte_order_mark_does_not_hide_first_line(tmp_path):
    target = tmp_path / "SpecialK.ini"
    target.write_bytes(b"\xef\xbb\xbfTargetFPS=60\r\nFontScale=1.0\r\n")

    result = patcher().apply(target, {"TargetFPS": "144"})

    assert result.skipped_keys == []
    assert result.replaced_indices == {0}
    assert target.read_bytes().startswith(b"\xef\xbb\xbfTargetFPS=144")
    assert target.read_text(encoding="utf-8-sig").splitlines() == ["TargetFPS=144", "FontScale=1.0"]


@pytest.mark.parametrize("key", ["", " "])
def test_blank_key_rejected(tmp_path, key):
    target = tmp_path / "a.ini"
    target.write_text("[Render]\nTargetFPS=60\n")

    with pytest.raises(ValueError):
        patcher().apply(target, [KeyValueEntry(key, "x")])

    assert target.read_text() == "[Render]\nTargetFPS=60\n"
