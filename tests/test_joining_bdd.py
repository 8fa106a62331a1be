"""Behavioural tests for joining and splitting paths."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"

from tests.steps import *  # noqa: F403,E402 - import shared step definitions


@scenario(
    str(FEATURES_DIR / "joining.feature"),
    "An empty leading fragment roots the result",
)
def test_join_rooted() -> None:
    """Joining onto an empty fragment builds an absolute path."""
    pass


@scenario(
    str(FEATURES_DIR / "joining.feature"),
    "A drive letter joined with nothing is the drive root",
)
def test_join_drive_root() -> None:
    """Joining a drive letter with an empty tail yields the drive root."""
    pass


@scenario(str(FEATURES_DIR / "joining.feature"), "Joined fragments are normalized")
def test_join_normalizes() -> None:
    """Joined output is canonical."""
    pass


@scenario(
    str(FEATURES_DIR / "joining.feature"),
    "A dialect is never mistaken for a path",
)
def test_join_misuse() -> None:
    """Passing a dialect positionally is rejected."""
    pass


@scenario(str(FEATURES_DIR / "joining.feature"), "Splitting is literal")
def test_split_components() -> None:
    """Splitting keeps the drive letter as the first component."""
    pass
