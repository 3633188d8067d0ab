"""Tests for the static scaffolding file sets."""

from devs_scaffold.core.document import DocList, DocMap, identity_of, to_plain
from devs_scaffold.core.file_set import DocumentEntry, TextEntry
from devs_scaffold.scaffolding.config import IMPORT_PREFIX, LIBDIR, MAIN
from devs_scaffold.scaffolding.templates import (
    get_service_spec_template,
    project_files,
    service_files,
    sim_files,
)


def test_project_files_are_create_only() -> None:
    files = project_files()

    assert list(files) == [
        "src/tsconfig.json",
        ".prettierrc",
        ".vscode/extensions.json",
        ".vscode/launch.json",
        "devsconfig.json",
        "package.json",
        MAIN,
        "README.md",
    ]
    for path, entry in files.items():
        if isinstance(entry, DocumentEntry):
            assert not entry.is_patch, path


def test_project_tsconfig_includes_lib_dir() -> None:
    entry = project_files()["src/tsconfig.json"]

    assert isinstance(entry, DocumentEntry)
    assert to_plain(entry.document)["include"] == ["*.ts", f"../{LIBDIR}/*.ts"]  # type: ignore[index]


def test_main_template_imports_core() -> None:
    entry = project_files()[MAIN]

    assert isinstance(entry, TextEntry)
    assert entry.content.startswith(IMPORT_PREFIX)


def test_sim_patch_lists_carry_names() -> None:
    """Every list patched into existing files must be mergeable by name."""
    for path, entry in sim_files().items():
        if not (isinstance(entry, DocumentEntry) and entry.is_patch):
            continue
        assert isinstance(entry.document, DocMap)
        for key, value in entry.document.items():
            if isinstance(value, DocList):
                assert all(identity_of(item) for item in value), f"{path}:{key}"


def test_sim_patches_launch_and_package() -> None:
    files = sim_files()

    patched = [
        path for path, entry in files.items()
        if isinstance(entry, DocumentEntry) and entry.is_patch
    ]
    assert patched == [".vscode/launch.json", "package.json"]


def test_service_files() -> None:
    files = service_files("Light Level", "lightlevel", 0x1234ABCD)

    assert list(files) == ["services/lightlevel.md", "services/README.md"]


def test_service_spec_template() -> None:
    spec = get_service_spec_template("Light Level", 0x1234ABCD)

    assert "    identifier: 0x1234abcd\n    extends: _sensor\n" in spec
    assert "Measures Light Level." in spec
    assert "    ro level: u0.16 / @ reading" in spec
