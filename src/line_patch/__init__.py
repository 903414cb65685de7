"""Line-oriented patcher for key/value style text files.

Three ways to patch a file, all sharing the same load, scan, rewrite cycle:

* :class:`KeyedLineUpdater` sets ``key=value`` lines, appending missing keys.
* :class:`WordMatchLineReplacer` overwrites lines that contain given words.
* :class:`ProfilePatcher` rewrites lines from a JSON profile through a
  template and never appends.
"""

from .errors import (
    LinePatchError,
    PatchFileNotFoundError,
    ProfileNotFoundError,
    ProfileParseError,
    ReadFailedError,
    WriteFailedError,
)
from .keyed import KeyedLineUpdater, update_keys
from .models import KeyValueEntry, MatchPolicy, MatchScope, PatchResult
from .overrides import OverrideContext, resolve_overrides
from .profile_mode import BatchReport, ProfileOptions, ProfilePatcher, render_line
from .profiles import flatten_entries, load_profile, load_profile_document, select_profile
from .word_replace import ReplaceOptions, WordMatchLineReplacer

__all__: list[str] = [
    "BatchReport",
    "KeyValueEntry",
    "KeyedLineUpdater",
    "LinePatchError",
    "MatchPolicy",
    "MatchScope",
    "OverrideContext",
    "PatchFileNotFoundError",
    "PatchResult",
    "ProfileNotFoundError",
    "ProfileOptions",
    "ProfileParseError",
    "ProfilePatcher",
    "ReadFailedError",
    "ReplaceOptions",
    "WordMatchLineReplacer",
    "WriteFailedError",
    "flatten_entries",
    "load_profile",
    "load_profile_document",
    "render_line",
    "resolve_overrides",
    "select_profile",
    "update_keys",
]
