# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Logging setup shared by the command-line scripts."""

from __future__ import annotations

import logging
import sys


def configure_logging(prog: str, verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format=f"[{prog}] %(levelname)s: %(message)s",
        force=True,
    )
