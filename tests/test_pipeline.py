import os

import pytest

from pipex.errors import FileOpenError
from pipex.pipeline import main, open_file, run_pipeline

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\nsecond line\n")
    return path


def test_pipeline_transforms_input(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(infile, "cat", "tr a-z A-Z", out, ENV)
    assert status == 0
    assert out.read_text() == infile.read_text().upper()


def test_pipeline_status_comes_from_last_stage(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert run_pipeline(infile, "cat", "grep nomatchanywhere", out, ENV) == 1
    assert out.read_text() == ""


def test_missing_infile_reports_and_still_runs_second(tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = run_pipeline(tmp_path / "absent.txt", "cat", "cat", out, ENV)
    assert status == 0
    assert out.exists() and out.read_text() == ""
    assert "Can't touch this" in capsys.readouterr().err


def test_unknown_command_reports_and_truncates_output(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    out.write_text("old content")
    run_pipeline(infile, "cat", "no-such-command-anywhere", out, ENV)
    assert out.read_text() == ""
    assert "Bru, you let it blank" in capsys.readouterr().err


def test_empty_command_reports(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = run_pipeline(infile, "cat", "   ", out, ENV)
    assert status in (0, 1, 141)
    assert "Give me a command" in capsys.readouterr().err


def test_open_file_for_output_creates_and_truncates(tmp_path):
    path = tmp_path / "target.txt"
    path.write_text("stale")
    fd = open_file(path, True)
    try:
        os.write(fd, b"new")
    finally:
        os.close(fd)
    assert path.read_text() == "new"


def test_open_file_for_input_reads(infile):
    fd = open_file(infile, False)
    try:
        assert os.read(fd, 1024) == infile.read_bytes()
    finally:
        os.close(fd)


def test_open_missing_input_raises(tmp_path):
    with pytest.raises(FileOpenError) as info:
        open_file(tmp_path / "absent.txt", False)
    assert info.value.path == str(tmp_path / "absent.txt")


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_main_wrong_argument_count_returns_zero(argv, tmp_path):
    assert main(argv) == 0
    assert not (tmp_path / "d").exists()


def test_main_runs_pipeline(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()