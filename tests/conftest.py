"""Shared pytest fixtures for chronotypes tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

from chronotypes.services.datetime_types import install_datetime_types
from chronotypes.services.registry import TypeRegistry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def empty_registry() -> TypeRegistry:
    """A registry with nothing registered."""
    return TypeRegistry()


@pytest.fixture
def registry() -> TypeRegistry:
    """An isolated registry carrying the built-in date/time types.

    Tests that register extra types use this instead of the process-wide
    ``REGISTRY`` so they cannot leak into one another.
    """
    reg = TypeRegistry()
    install_datetime_types(reg)
    return reg


class TaggedHandle:
    """Stand-in for a translation handle exposing ``language_tag()``."""

    def __init__(self, tag: str) -> None:
        self._tag = tag

    def language_tag(self) -> str:
        return self._tag


class TaggedRecord:
    """Stand-in exposing ``language_tag`` as a plain attribute."""

    def __init__(self, tag: str) -> None:
        self.language_tag = tag


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    chrono = logging.getLogger("chronotypes")
    chrono_level = chrono.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    chrono.setLevel(chrono_level)
