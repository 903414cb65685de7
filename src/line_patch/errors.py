# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Error kinds raised by the patcher and its profile plumbing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class LinePatchError(Exception):
    """Base class for every failure the scripts report with a non-zero exit.

    Subclasses also derive from the matching builtin (``FileNotFoundError``,
    ``KeyError``...) so callers that only know the builtin still catch them.
    """

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    # KeyError and OSError would otherwise decorate the message.
    def __str__(self) -> str:
        return self.message


class PatchFileNotFoundError(LinePatchError, FileNotFoundError):
    def __init__(self, path: PathLike, what: str = "file") -> None:
        super().__init__(f"{what} not found: {path}", path)


class ProfileNotFoundError(LinePatchError, KeyError):
    def __init__(self, profile: str, path: Optional[PathLike] = None) -> None:
        where = f" in {path}" if path is not None else ""
        super().__init__(f"profile '{profile}' not found{where}", path)
        self.profile = profile


class ProfileParseError(LinePatchError, ValueError):
    pass


class WriteFailedError(LinePatchError, OSError):
    def __init__(self, path: PathLike, reason: BaseException) -> None:
        super().__init__(f"failed to write {path}: {reason}", path)
        self.reason = reason


class ReadFailedError(LinePatchError, OSError):
    def __init__(self, path: PathLike, reason: BaseException) -> None:
        super().__init__(f"failed to read {path}: {reason}", path)
        self.reason = reason
