"""Project initialization and add-on scaffolding.

Each entry point writes one file set and then hands the project root to an
optional ``finish`` callback (dependency install, first build, ...). The
callback only runs once every file was written.

Usage:
    >>> from devs_scaffold.scaffolding import init_project, add_sim
    >>> root = init_project("my-project")
    >>> add_sim(directory=root)
"""

from __future__ import annotations

import os
import random
import re
from collections.abc import Callable
from pathlib import Path
from typing import Union

from devs_scaffold.core.errors import ScaffoldError
from devs_scaffold.core.file_set import FileSet
from devs_scaffold.core.ignore_list import merge_ignore_list
from devs_scaffold.core.materializer import MaterializeOptions, WriteAction, materialize
from devs_scaffold.helpers.helpers_logging import (
    print_debug,
    print_header,
    print_info,
    print_success,
)
from devs_scaffold.scaffolding.config import (
    DOCS_URL,
    GITIGNORE,
    GITIGNORE_TOKENS,
    SERVICE_ID_PREFIX,
    SERVICE_ID_RANDOM_MASK,
)
from devs_scaffold.scaffolding.templates import project_files, service_files, sim_files

FinishHook = Callable[[Path], None]
PathLike = Union[str, "os.PathLike[str]"]


def report_write(action: WriteAction, relative_path: str) -> None:
    """Print one materializer action."""
    if action is WriteAction.CREATED:
        print_success(f"Created file: {relative_path}")
    elif action is WriteAction.OVERWRITTEN:
        print_success(f"Overwrote file: {relative_path}")
    elif action is WriteAction.MERGED:
        print_success(f"Updated file: {relative_path}")
    else:
        print_info(f"⊘ Skipped (exists): {relative_path}")


def write_files(
    directory: PathLike | None,
    options: MaterializeOptions | None,
    files: FileSet,
) -> Path:
    """Materialize ``files`` under ``directory`` with console reporting."""
    root = materialize(directory, files, options, reporter=report_write)
    print_debug(f"wrote {len(files)} entries under {root}")
    return root


def update_gitignore(root: Path) -> None:
    """Make sure generated folders are ignored by git."""
    if merge_ignore_list(root / GITIGNORE, GITIGNORE_TOKENS):
        print_success(f"Updated file: {GITIGNORE}")
    else:
        print_debug(f"skip {GITIGNORE}, already up to date")


def _finish(root: Path, finish: FinishHook | None) -> None:
    if finish is not None:
        finish(root)


def init_project(
    directory: PathLike | None = None,
    options: MaterializeOptions | None = None,
    finish: FinishHook | None = None,
) -> Path:
    """Configure a DeviceScript project in ``directory``.

    Args:
        directory: Project root (default: current directory)
        options: Materialization options
        finish: Called with the project root after all files are written

    Returns:
        The absolute project root
    """
    print_header("Configuring DeviceScript project")

    root = write_files(directory, options, project_files())
    update_gitignore(root)
    _finish(root, finish)

    print_info("")
    print_info(
        "Your DeviceScript project is initialized. "
        + "Try 'devs add' to see what can be added."
    )
    print_info(f"To get more help, {DOCS_URL}getting-started/ .")
    print_info("")
    return root


def add_sim(
    options: MaterializeOptions | None = None,
    directory: PathLike | None = ".",
    finish: FinishHook | None = None,
) -> Path:
    """Add node.js simulator support to an existing project."""
    print_header("Adding simulator support")

    root = write_files(directory, options, sim_files())
    _finish(root, finish)

    print_info("")
    print_success("Simulator support added.")
    print_info("")
    return root


def service_id_for(name: str) -> str:
    """Derive the service file stem: lower case, whitespace removed."""
    return re.sub(r"\s+", "", name.lower())


def random_service_identifier(rng: random.Random | None = None) -> int:
    """Pick a random service class identifier in the 0x1xxxxxxx range."""
    source = rng or random.SystemRandom()
    return source.randint(0, SERVICE_ID_RANDOM_MASK) | SERVICE_ID_PREFIX


def add_service(
    name: str,
    options: MaterializeOptions | None = None,
    directory: PathLike | None = ".",
    finish: FinishHook | None = None,
    identifier: int | None = None,
) -> Path:
    """Add a custom sensor service specification.

    Args:
        name: Service name (e.g., 'Light Level')
        options: Materialization options
        directory: Project root
        finish: Called with the project root after all files are written
        identifier: Service class identifier (random when omitted)

    Raises:
        ScaffoldError: If ``name`` is empty
    """
    if not name or not name.strip():
        raise ScaffoldError("service name required; example: 'Light Level'")

    service_id = service_id_for(name)
    print_header(f'Adding service "{name}"')

    if identifier is None:
        identifier = random_service_identifier()

    root = write_files(directory, options, service_files(name, service_id, identifier))
    _finish(root, finish)

    print_info("")
    print_success(f"Service added {service_id}.")
    print_info("")
    return root
