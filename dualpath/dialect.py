"""Path dialects and the grammar rules each one implies.

A :class:`Dialect` selects between POSIX and Windows syntax. The rules that
differ between the two (separator characters, the shape of the lead token,
what counts as absolute) live in a single :class:`DialectRules` strategy so
the tokenizer and the derived operations stay dialect-agnostic.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as t

from .errors import PathMisuseError, UnknownDialectError


class Dialect(enum.Enum):
    """Path syntax selector."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def rules(self) -> DialectRules:
        """Return the grammar rules for this dialect."""
        return _RULES[self]

    @property
    def sep(self) -> str:
        """Return the canonical separator character."""
        return self.rules.sep

    @classmethod
    def coerce(cls, value: Dialect | str | None = None) -> Dialect:
        """Return the :class:`Dialect` described by *value*.

        ``None`` selects the host dialect. Strings are matched against the
        names reported by ``sys.platform`` and ``os.name`` as well as the
        enum values, so ``"win32"``, ``"nt"`` and ``"linux"`` all work.
        """
        if isinstance(value, Dialect):
            return value
        if value is None:
            from .platform import host_dialect

            return host_dialect()
        if not isinstance(value, str):
            msg = f"dialect must be a Dialect, str or None, got {type(value).__name__}"
            raise PathMisuseError(msg)
        return _dialect_from_name(value)


@dc.dataclass(frozen=True, slots=True)
class DialectRules:
    """Constants and matchers that define one path grammar.

    Attributes
    ----------
    sep : str
        Canonical separator used when building paths.
    separators : str
        Every character accepted as a separator when parsing.
    delimiter : str
        Separator between entries of a search-path list such as ``PATH``.
    lead : re.Pattern[str]
        Matches the drive/root prefix at the start of a path.
    absolute : re.Pattern[str]
        Matches the start of an absolute path.
    """

    sep: str
    separators: str
    delimiter: str
    lead: re.Pattern[str]
    absolute: re.Pattern[str]
    span: re.Pattern[str] = dc.field(init=False)

    def __post_init__(self) -> None:
        """Derive the component matcher from the separator set."""
        span = re.compile(f"[^{re.escape(self.separators)}]+")
        object.__setattr__(self, "span", span)

    def is_separator(self, char: str) -> bool:
        """Return ``True`` when *char* separates components."""
        return char != "" and char in self.separators

    def match_lead(self, path: str) -> str | None:
        """Return the lead token text at the start of *path*, if any."""
        match = self.lead.match(path)
        return match.group(0) if match else None

    @property
    def current_directory(self) -> str:
        """Return the relative prefix naming the current directory."""
        return "." + self.sep


_RULES: t.Final[dict[Dialect, DialectRules]] = {
    Dialect.POSIX: DialectRules(
        sep="/",
        separators="/",
        delimiter=":",
        lead=re.compile(r"/"),
        absolute=re.compile(r"/"),
    ),
    Dialect.WINDOWS: DialectRules(
        sep="\\",
        separators="\\/",
        delimiter=";",
        lead=re.compile(r"(?:[A-Za-z]:)?[\\/]+"),
        absolute=re.compile(r"[A-Za-z]:[\\/]"),
    ),
}

# Prefixes are matched against the start of the lowercased name, mirroring how
# ``sys.platform`` values are usually tested (``"win32"``, ``"cygwin"`` ...).
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("windows", "win", "nt")
_POSIX_PREFIXES: t.Final[tuple[str, ...]] = (
    "posix",
    "linux",
    "darwin",
    "macos",
    "freebsd",
    "openbsd",
    "netbsd",
    "sunos",
    "aix",
    "cygwin",
    "ios",
    "android",
    "msys",
    "emscripten",
    "wasi",
)


def _dialect_from_name(name: str) -> Dialect:
    normalised = name.strip().lower()
    if normalised.startswith(_POSIX_PREFIXES):
        return Dialect.POSIX
    if normalised.startswith(_WINDOWS_PREFIXES):
        return Dialect.WINDOWS
    raise UnknownDialectError(name)


__all__ = ["Dialect", "DialectRules"]
