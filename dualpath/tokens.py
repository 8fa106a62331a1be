"""Path tokens and the dialect-parameterized tokenizer.

Both dialects share one grammar shape::

    main := [lead] [span] (sep span)* [sep ""]
    span := 1+ characters outside the separator set
    sep  := 1+ separator characters, treated as a single boundary

Only the lead rule and the separator set differ, and those come from
:class:`~dualpath.dialect.DialectRules`. Every piece is optional, so the
grammar matches any input and :func:`tokenize` never fails.
"""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._validators import coerce_path
from .dialect import Dialect


@dc.dataclass(frozen=True, slots=True)
class Lead:
    """Drive or root prefix, kept verbatim (``/``, ``C:\\``, ``\\\\``)."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Component:
    """A run of non-separator characters.

    The empty string marks a trailing separator so that "ends with a slash"
    survives into normalization.
    """

    text: str

    @property
    def is_current(self) -> bool:
        """Return ``True`` for the ``.`` component."""
        return self.text == "."

    @property
    def is_parent(self) -> bool:
        """Return ``True`` for the ``..`` component."""
        return self.text == ".."


PathToken = t.Union[Lead, Component]


def tokenize(path: str, dialect: Dialect | str | None = None) -> tuple[PathToken, ...]:
    """Split *path* into an ordered token stream under *dialect*.

    A ``Lead`` appears at most once and only as the first token. Runs of
    separators collapse, and a trailing separator yields ``Component("")``.
    A drive-relative Windows path such as ``C:tmp\\x`` has no lead because
    the lead rule requires a separator after the colon.
    """
    text = coerce_path(path)
    rules = Dialect.coerce(dialect).rules
    tokens: list[PathToken] = []

    lead = rules.match_lead(text)
    rest = text
    if lead is not None:
        tokens.append(Lead(lead))
        rest = text[len(lead) :]

    tokens.extend(Component(span) for span in rules.span.findall(rest))
    if rest and rules.is_separator(rest[-1]):
        tokens.append(Component(""))
    return tuple(tokens)


__all__ = ["Component", "Lead", "PathToken", "tokenize"]
