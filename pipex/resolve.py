"""Finding the PATH variable and resolving commands to executable files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.split import split_words

_PATH_PREFIX = "PATH="


def path_from_env(env: Mapping[str, str] | Iterable[str]) -> str | None:
    """The value of PATH in ``env``, or ``None`` when it is not set.

    ``env`` is either a mapping of names to values or a sequence of
    ``NAME=value`` strings.
    """
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith(_PATH_PREFIX):
            return entry[len(_PATH_PREFIX):]
    return None


def command_head(cmd: str) -> str:
    """The command name: everything before the first space."""
    return cmd.split(" ", 1)[0]


def find_executable(cmd: str, path: str) -> str | None:
    """The first ``dir/name`` that exists, searching the directories of ``path``.

    ``name`` is the head of ``cmd``; ``None`` if no directory holds it.
    """
    head = command_head(cmd)
    for directory in split_words(path, ":"):
        candidate = f"{directory}/{head}"
        if os.path.exists(candidate):
            return candidate
    return None