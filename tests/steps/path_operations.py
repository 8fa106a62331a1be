"""pytest-bdd steps that drive the dualpath operations."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from pytest_bdd import given, parsers, then, when

import dualpath
from dualpath.errors import PathMisuseError
from dualpath.flavours import PathFlavour, flavour_for

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import pytest


@dc.dataclass(slots=True)
class Outcome:
    """Result of the most recent ``When`` step."""

    value: object = None
    error: Exception | None = None


@given(parsers.cfparse("the {dialect} dialect"), target_fixture="flavour")
def select_dialect(dialect: str) -> PathFlavour:
    """Bind the scenario to a dialect, or to the host for ``host``."""
    return flavour_for(None if dialect == "host" else dialect)


@given(parsers.cfparse('the platform override is "{platform}"'))
def set_platform_override(monkeypatch: pytest.MonkeyPatch, platform: str) -> None:
    """Simulate running on an alternate host such as Windows."""
    monkeypatch.setenv(dualpath.PLATFORM_OVERRIDE_ENV, platform)


@when(parsers.re(r'I normalize "(?P<path>[^"]*)"'), target_fixture="outcome")
def normalize_path(flavour: PathFlavour, path: str) -> Outcome:
    """Normalize *path* under the scenario dialect."""
    return Outcome(flavour.normalize(path))


@when(
    parsers.re(r'I join "(?P<first>[^"]*)" and "(?P<second>[^"]*)"'),
    target_fixture="outcome",
)
def join_paths(flavour: PathFlavour, first: str, second: str) -> Outcome:
    """Join two fragments."""
    return Outcome(flavour.join(first, second))


@when("I join the dialect selector as if it were a path", target_fixture="outcome")
def join_dialect(flavour: PathFlavour) -> Outcome:
    """Pass the dialect positionally, which ``join`` must reject."""
    try:
        dualpath.join(flavour.dialect)  # type: ignore[arg-type]
    except PathMisuseError as exc:
        return Outcome(error=exc)
    return Outcome()


@when(
    parsers.re(r'I split "(?P<path>[^"]*)" into components'),
    target_fixture="outcome",
)
def split_path(flavour: PathFlavour, path: str) -> Outcome:
    """Split *path* literally on the dialect separator."""
    return Outcome(flavour.split_components(path))


@when(
    parsers.re(r'I check whether "(?P<path>[^"]*)" is absolute'),
    target_fixture="outcome",
)
def check_absolute(flavour: PathFlavour, path: str) -> Outcome:
    """Record whether *path* is absolute."""
    return Outcome(flavour.is_absolute(path))


@when(
    parsers.re(r'I compute the path from "(?P<source>[^"]*)" to "(?P<target>[^"]*)"'),
    target_fixture="outcome",
)
def compute_relative(flavour: PathFlavour, source: str, target: str) -> Outcome:
    """Compute the relative walk from *source* to *target*."""
    return Outcome(flavour.relative_path(source, target))


@when(
    parsers.re(r'I resolve "(?P<path>[^"]*)" to an absolute path'),
    target_fixture="outcome",
)
def resolve_absolute(flavour: PathFlavour, path: str) -> Outcome:
    """Resolve *path* against the working directory."""
    return Outcome(flavour.absolute_path(path))


@then(parsers.re(r'the result is "(?P<expected>[^"]*)"'))
def check_result(outcome: Outcome, expected: str) -> None:
    """Compare the last result with *expected*."""
    assert outcome.error is None
    assert outcome.value == expected


@then(parsers.cfparse('the components are "{expected}"'))
def check_components(outcome: Outcome, expected: str) -> None:
    """Compare split components given as a ``|``-separated list."""
    assert outcome.value == expected.split("|")


@then("the path is absolute")
def path_is_absolute(outcome: Outcome) -> None:
    """The checked path was absolute."""
    assert outcome.value is True


@then("the path is not absolute")
def path_is_not_absolute(outcome: Outcome) -> None:
    """The checked path was relative."""
    assert outcome.value is False


@then("a misuse error is raised")
def misuse_error_raised(outcome: Outcome) -> None:
    """The last operation rejected its arguments."""
    assert isinstance(outcome.error, PathMisuseError)
