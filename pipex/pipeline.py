"""Running two commands joined by a pipe between an input and output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import time
from collections.abc import Mapping, Sequence

from pipex.errors import CommandNotFoundError, EmptyCommandError, FileOpenError, PipexError
from pipex.paths import find_command
from pipex.textops import split

_POLL_INTERVAL = 0.005


def open_file(path: str | os.PathLike[str], for_output: bool) -> int:
    """Open *path* for reading, or for writing with create and truncate.

    Returns the file descriptor; raises FileOpenError on failure.
    """
    try:
        if for_output:
            return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise FileOpenError(os.fspath(path), exc.strerror) from exc


def _launch(command: str, env: Mapping[str, str], stdin: int, stdout: int) -> subprocess.Popen:
    words = split(command, " ")
    if not words:
        raise EmptyCommandError()
    path = find_command(words[0], env)
    if path is None:
        raise CommandNotFoundError(words[0], os.strerror(errno.ENOENT))
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=dict(env), close_fds=True
        )
    except OSError as exc:
        raise CommandNotFoundError(words[0], exc.strerror) from exc


def _start_stage(
    file: str | os.PathLike[str],
    for_output: bool,
    command: str,
    pipe_fd: int,
    env: Mapping[str, str],
) -> subprocess.Popen | None:
    """Open the stage's file and start its command; None if either fails."""
    try:
        fd = open_file(file, for_output)
    except FileOpenError as exc:
        print(exc, file=sys.stderr)
        return None
    try:
        if for_output:
            return _launch(command, env, stdin=pipe_fd, stdout=fd)
        return _launch(command, env, stdin=fd, stdout=pipe_fd)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return None
    finally:
        os.close(fd)


def _exit_status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def run_pipeline(
    infile: str | os.PathLike[str],
    first: str,
    second: str,
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``< infile first | second > outfile`` and return an exit status.

    Each stage fails on its own with status 1, reported on standard error.
    The result is the status of whichever stage finished last.
    """
    if env is None:
        env = os.environ
    finished: list[int] = []
    running: list[subprocess.Popen] = []
    read_fd, write_fd = os.pipe()
    try:
        stages = ((infile, False, first, write_fd), (outfile, True, second, read_fd))
        for file, for_output, command, pipe_fd in stages:
            proc = _start_stage(file, for_output, command, pipe_fd, env)
            if proc is None:
                finished.append(PipexError.exit_status)
            else:
                running.append(proc)
            if not for_output:
                os.close(write_fd)
                write_fd = -1
    finally:
        if write_fd >= 0:
            os.close(write_fd)
        os.close(read_fd)
    while running:
        for proc in list(running):
            code = proc.poll()
            if code is not None:
                finished.append(_exit_status(code))
                running.remove(proc)
        if running:
            time.sleep(_POLL_INTERVAL)
    return finished[-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return 0
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile, os.environ)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1