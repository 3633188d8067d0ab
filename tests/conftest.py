"""Shared fixtures for the devs-scaffold test suite."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from devs_scaffold.helpers import helpers_logging


@pytest.fixture()
def project_dir(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it.

    After the test, the working directory is restored.
    """
    project = tmp_path / "project"
    project.mkdir()
    original_cwd = Path.cwd()
    os.chdir(project)
    try:
        yield project
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def _quiet_debug() -> Iterator[None]:
    """Keep debug output off unless a test turns it on."""
    previous = helpers_logging.is_verbose()
    helpers_logging.set_verbose(False)
    try:
        yield
    finally:
        helpers_logging.set_verbose(previous)
