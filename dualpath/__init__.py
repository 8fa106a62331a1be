"""Dual-dialect path manipulation for POSIX and Windows path strings.

The dialect is always an explicit, optional argument: it defaults to the
host platform but any operation can be asked to treat its input as POSIX or
Windows syntax. No operation touches the filesystem.
"""

from __future__ import annotations

from .dialect import Dialect, DialectRules
from .environment import (
    WorkingDirectoryStack,
    current_working_directory,
    working_directory,
)
from .errors import (
    DualPathError,
    PathMisuseError,
    UnknownDialectError,
    WorkingDirectoryError,
)
from .flavours import PathFlavour, flavour_for, posix, windows
from .normalizer import CanonicalBuilder, normalize_tokens
from .paths import (
    absolute_path,
    basename,
    delimiter,
    dirname,
    extension,
    is_absolute,
    join,
    normalize,
    relative_path,
    separator,
    split_components,
)
from .platform import PLATFORM_OVERRIDE_ENV, host_dialect, is_windows
from .tokens import Component, Lead, PathToken, tokenize

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "CanonicalBuilder",
    "Component",
    "Dialect",
    "DialectRules",
    "DualPathError",
    "Lead",
    "PathFlavour",
    "PathMisuseError",
    "PathToken",
    "UnknownDialectError",
    "WorkingDirectoryError",
    "WorkingDirectoryStack",
    "absolute_path",
    "basename",
    "current_working_directory",
    "delimiter",
    "dirname",
    "extension",
    "flavour_for",
    "host_dialect",
    "is_absolute",
    "is_windows",
    "join",
    "normalize",
    "normalize_tokens",
    "posix",
    "relative_path",
    "separator",
    "split_components",
    "tokenize",
    "windows",
    "working_directory",
]
