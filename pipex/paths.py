"""Locating an executable for a command name."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.textops import split


def candidate(cmd: str, directory: str) -> str | None:
    """Return ``directory/cmd`` if it exists and is executable, else None."""
    path = f"{directory}/{cmd}"
    if os.access(path, os.F_OK | os.X_OK):
        return path
    return None


def find_command(cmd: str | None, env: Mapping[str, str] | None) -> str | None:
    """Resolve *cmd* to an executable path using the PATH in *env*.

    A name holding a slash is used as is when it is readable and executable;
    otherwise each non-empty PATH entry is tried in order. Returns None when
    nothing matches, when *cmd* is empty, or when there is no environment or
    no PATH in it.
    """
    if not cmd or env is None:
        return None
    if "/" in cmd and os.access(cmd, os.F_OK | os.X_OK | os.R_OK):
        return cmd
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        found = candidate(cmd, directory)
        if found is not None:
            return found
    return None