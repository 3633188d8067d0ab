"""Project scaffolding for DeviceScript projects.

Public API:
    init_project: Write the project skeleton and update .gitignore
    add_sim: Add node.js simulator support (patches launch.json/package.json)
    add_service: Add a custom service specification stub
    dispatch_request: Run a side-channel request (addSim, addService)

Example:
    from devs_scaffold.scaffolding import init_project, add_service

    root = init_project("my-project")
    add_service("Light Level", directory=root)
"""

from .project import add_service, add_sim, init_project, service_id_for
from .requests import REQUEST_HANDLERS, dispatch_request
from .templates import project_files, service_files, sim_files

__all__ = [
    "REQUEST_HANDLERS",
    "add_service",
    "add_sim",
    "dispatch_request",
    "init_project",
    "project_files",
    "service_files",
    "service_id_for",
    "sim_files",
]
