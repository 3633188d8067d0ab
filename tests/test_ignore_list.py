"""Tests for the additive .gitignore merge."""

from pathlib import Path

from devs_scaffold.core.ignore_list import merge_ignore_list

_TOKENS = ["node_modules", ".devicescript"]


def test_creates_missing_file_with_exact_tokens(tmp_path: Path) -> None:
    path = tmp_path / ".gitignore"

    assert merge_ignore_list(path, _TOKENS) is True

    assert path.read_text() == "node_modules\n.devicescript"


def test_appends_only_missing_tokens(tmp_path: Path) -> None:
    path = tmp_path / ".gitignore"
    path.write_text("dist\nnode_modules/\n")

    assert merge_ignore_list(path, _TOKENS) is True

    assert path.read_text() == "dist\nnode_modules/\n\n.devicescript"


def test_untouched_when_all_tokens_present(tmp_path: Path) -> None:
    path = tmp_path / ".gitignore"
    path.write_text("node_modules\n.devicescript/\n")
    mtime = path.stat().st_mtime_ns

    assert merge_ignore_list(path, _TOKENS) is False

    assert path.read_text() == "node_modules\n.devicescript/\n"
    assert path.stat().st_mtime_ns == mtime


def test_second_run_is_a_no_op(tmp_path: Path) -> None:
    path = tmp_path / ".gitignore"
    path.write_text("*.log")

    merge_ignore_list(path, _TOKENS)
    after_first = path.read_text()

    assert merge_ignore_list(path, _TOKENS) is False
    assert path.read_text() == after_first
