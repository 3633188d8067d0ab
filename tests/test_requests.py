"""Unit tests for side-channel request dispatch."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from devs_scaffold.core.errors import ScaffoldError
from devs_scaffold.core.materializer import MaterializeOptions
from devs_scaffold.scaffolding import requests


def test_registered_request_types() -> None:
    assert set(requests.REQUEST_HANDLERS) == {"addSim", "addService"}


def test_unknown_request_type_raises() -> None:
    with pytest.raises(ScaffoldError) as exc_info:
        requests.dispatch_request("addBoard", {})

    assert "addBoard" in exc_info.value.message
    assert "addService" in exc_info.value.message


@patch("devs_scaffold.scaffolding.requests.add_sim")
def test_add_sim_builds_options(mock_add_sim: Mock) -> None:
    mock_add_sim.return_value = Path("/tmp/project")

    response = requests.dispatch_request("addSim", {"force": True, "spaces": 2, "dir": "x"})

    assert response == {"dir": "/tmp/project"}
    mock_add_sim.assert_called_once_with(
        MaterializeOptions(force=True, spaces=2),
        directory="x",
    )


@patch("devs_scaffold.scaffolding.requests.add_service")
def test_add_service_passes_name(mock_add_service: Mock) -> None:
    mock_add_service.return_value = Path("/tmp/project")

    requests.dispatch_request("addService", {"name": "Light Level"})

    mock_add_service.assert_called_once_with(
        "Light Level",
        MaterializeOptions(),
        directory=".",
    )


def test_add_service_without_name_raises(project_dir: Path) -> None:
    with pytest.raises(ScaffoldError):
        requests.dispatch_request("addService")


def test_add_service_writes_files(project_dir: Path) -> None:
    response = requests.dispatch_request("addService", {"name": "Heart Rate"})

    assert response == {"dir": str(project_dir.resolve())}
    assert (project_dir / "services" / "heartrate.md").is_file()


@pytest.mark.parametrize("spaces", ["wide", None, 12])
def test_bad_spaces_raise_scaffold_error(spaces: object) -> None:
    with pytest.raises(ScaffoldError) as exc_info:
        requests.dispatch_request("addSim", {"spaces": spaces})

    assert "Invalid request options" in exc_info.value.message
