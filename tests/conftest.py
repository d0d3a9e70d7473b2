"""Shared fixtures for cmdman tests."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from cmdman.command import Command
from cmdman.config import ManPageOptions

FIXED_DATE = dt.datetime(2026, 1, 15, 9, 30, tzinfo=dt.UTC)


@pytest.fixture
def fixed_date() -> dt.datetime:
    """Return the date used by deterministic page fixtures."""
    return FIXED_DATE


@pytest.fixture
def options(tmp_path: Path, fixed_date: dt.datetime) -> ManPageOptions:
    """Build generation options writing into a per-test directory."""
    return ManPageOptions(directory=tmp_path, date=fixed_date)


@pytest.fixture
def app_tree() -> Command:
    """Return ``app`` with a single runnable ``app sub`` child."""
    root = Command(use="app", short="Example application")
    root.add_command(Command(use="sub", short="Run the sub command"))
    return root
