# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Whole-file load, write and backup helpers."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Sequence, Tuple

from .errors import PatchFileNotFoundError, PathLike, ReadFailedError, WriteFailedError

logger = logging.getLogger(__name__)

DEFAULT_BACKUP_SUFFIX = ".bak"
DEFAULT_ENCODING = "utf-8"
BOM = "\ufeff"


def read_lines(
    file_path: PathLike, encoding: str = DEFAULT_ENCODING
) -> Tuple[List[str], bool]:
    """Return the file's lines and whether it started with a byte order mark.

    Lines are split on newlines only, after universal newline decoding, so
    form feeds and other Unicode line breaks stay inside their line.
    """
    path = Path(file_path)
    if not path.is_file():
        raise PatchFileNotFoundError(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailedError(path, exc) from exc

    bom = text.startswith(BOM)
    if bom:
        text = text[len(BOM):]
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines, bom


def write_lines(
    file_path: PathLike,
    lines: Sequence[str],
    encoding: str = DEFAULT_ENCODING,
    bom: bool = False,
) -> None:
    # Text mode translates "\n" into the platform line ending.
    path = Path(file_path)
    text = "\n".join(lines) + "\n"
    if bom:
        text = BOM + text
    try:
        path.write_text(text, encoding=encoding)
    except OSError as exc:
        raise WriteFailedError(path, exc) from exc
    logger.debug("wrote %d line(s) to %s", len(lines), path)


def backup_path_for(file_path: PathLike, suffix: str = DEFAULT_BACKUP_SUFFIX) -> Path:
    path = Path(file_path)
    return path.with_name(path.name + suffix)


def backup_file(file_path: PathLike, suffix: str = DEFAULT_BACKUP_SUFFIX) -> Path:
    """Copy *file_path* byte-for-byte next to itself and return the copy's path.

    The copy is never removed again, whatever happens to the write that
    follows it.
    """
    path = Path(file_path)
    target = backup_path_for(path, suffix)
    try:
        shutil.copyfile(path, target)
    except OSError as exc:
        raise WriteFailedError(target, exc) from exc
    logger.info("backup written to %s", target)
    return target
