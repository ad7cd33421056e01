"""Locating executables through the PATH entry of an environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping

__all__ = ["PathNotFoundError", "split_words", "find_path", "resolve_command"]


class PathNotFoundError(LookupError):
    """Raised when an environment carries no PATH entry."""


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def _entries(environ: Mapping[str, str] | Iterable[str]) -> Iterator[str]:
    if isinstance(environ, Mapping):
        return (f"{key}={value}" for key, value in environ.items())
    return iter(environ)


def find_path(environ: Mapping[str, str] | Iterable[str]) -> str:
    """Return the value of the first environment entry whose name starts with PATH.

    ``environ`` is either a mapping or a sequence of ``KEY=VALUE`` strings.
    The value is everything after the first five characters of the entry.
    """
    for entry in _entries(environ):
        if entry.startswith("PATH"):
            return entry[5:]
    raise PathNotFoundError("no PATH entry in the environment")


def resolve_command(directories: Iterable[str], name: str) -> str | None:
    """Return ``directory/name`` for the first directory where that path exists."""
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None