import os

import pytest

from pipex.paths import candidate, find_command


def _make_tool(directory, name="tool", mode=0o755):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_candidate_joins_directory_and_command(tmp_path):
    tool = _make_tool(tmp_path / "bin")
    assert candidate("tool", str(tmp_path / "bin")) == str(tool)


def test_candidate_rejects_missing_or_non_executable(tmp_path):
    _make_tool(tmp_path / "bin", "plain", mode=0o644)
    assert candidate("plain", str(tmp_path / "bin")) is None
    assert candidate("absent", str(tmp_path / "bin")) is None


def test_find_command_searches_path_in_order(tmp_path):
    first = _make_tool(tmp_path / "a")
    _make_tool(tmp_path / "b")
    env = {"PATH": f"{tmp_path / 'a'}:{tmp_path / 'b'}"}
    assert find_command("tool", env) == str(first)


def test_find_command_skips_empty_entries(tmp_path):
    tool = _make_tool(tmp_path / "b")
    env = {"PATH": f"::{tmp_path / 'empty'}::{tmp_path / 'b'}:"}
    assert find_command("tool", env) == str(tool)


def test_find_command_uses_path_with_slash_directly(tmp_path):
    tool = _make_tool(tmp_path / "bin")
    assert find_command(str(tool), {}) == str(tool)


def test_find_command_without_path_variable(tmp_path):
    _make_tool(tmp_path / "bin")
    assert find_command("tool", {"HOME": str(tmp_path)}) is None


@pytest.mark.parametrize("cmd, env", [("", {"PATH": "/bin"}), (None, {"PATH": "/bin"}), ("ls", None)])
def test_find_command_missing_inputs(cmd, env):
    assert find_command(cmd, env) is None


def test_find_command_not_found(tmp_path):
    (tmp_path / "bin").mkdir()
    assert find_command("nothing-here", {"PATH": str(tmp_path / "bin")}) is None