"""Run ``infile < cmd1 | cmd2 > outfile`` as two connected child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from contextlib import ExitStack
from dataclasses import dataclass

from pipex.search import PathNotFoundError, find_path, resolve_command, split_words

__all__ = ["PipexError", "CommandNotFoundError", "Pipeline", "main"]

ERR_INFILE = "Infile"
ERR_OUTFILE = "Outfile"
ERR_INPUT = "Invalid number of arguments.\n"
ERR_PIPE = "Pipe"
ERR_CMD = "Command not found\n"

_FAILURE_STATUS = 127


class PipexError(Exception):
    """A failure that ends the whole run with ``exit_status``."""

    def __init__(self, message: str, exit_status: int = _FAILURE_STATUS) -> None:
        super().__init__(message)
        self.exit_status = exit_status


class CommandNotFoundError(PipexError):
    """A command that no PATH directory holds."""

    def __init__(self, command: str) -> None:
        super().__init__(ERR_CMD.rstrip("\n"), _FAILURE_STATUS)
        self.command = command


def _os_failure(label: str, exc: OSError) -> PipexError:
    return PipexError(f"{label}: {exc.strerror}", _FAILURE_STATUS)


def _launch(
    command: str,
    directories: list[str],
    env: dict[str, str],
    stdin: int,
    stdout: int,
) -> subprocess.Popen:
    args = split_words(command, " ")
    if not args:
        raise CommandNotFoundError(command)
    path = resolve_command(directories, args[0])
    if path is None:
        raise CommandNotFoundError(command)
    return subprocess.Popen(args, executable=path, stdin=stdin, stdout=stdout, env=env)


def _start(
    command: str,
    directories: list[str],
    env: dict[str, str],
    stdin: int,
    stdout: int,
) -> subprocess.Popen | int:
    """Start one stage; on failure report it and return the stage's exit status."""
    try:
        return _launch(command, directories, env, stdin, stdout)
    except CommandNotFoundError:
        sys.stderr.write(ERR_CMD)
        return _FAILURE_STATUS
    except OSError as exc:
        sys.stderr.write(f"{command}: {exc.strerror}\n")
        return _FAILURE_STATUS


@dataclass(frozen=True)
class Pipeline:
    """Two commands joined by a pipe, reading ``infile`` and writing ``outfile``."""

    infile: str
    first: str
    second: str
    outfile: str

    def run(self, environ: Mapping[str, str] | None = None) -> list[int]:
        """Run both commands and return their exit statuses in order.

        A command that cannot be found is reported on stderr and counts as
        status 127; the other command still runs.
        """
        env = dict(os.environ if environ is None else environ)
        with ExitStack() as files:
            try:
                infd = os.open(self.infile, os.O_RDONLY)
            except OSError as exc:
                raise _os_failure(ERR_INFILE, exc) from exc
            files.callback(os.close, infd)
            try:
                outfd = os.open(
                    self.outfile, os.O_TRUNC | os.O_CREAT | os.O_RDWR, 0o644
                )
            except OSError as exc:
                raise _os_failure(ERR_OUTFILE, exc) from exc
            files.callback(os.close, outfd)
            try:
                read_end, write_end = os.pipe()
            except OSError as exc:
                raise _os_failure(ERR_PIPE, exc) from exc
            with ExitStack() as pipe:
                pipe.callback(os.close, read_end)
                pipe.callback(os.close, write_end)
                directories = split_words(find_path(env), ":")
                children = [
                    _start(self.first, directories, env, infd, write_end),
                    _start(self.second, directories, env, read_end, outfd),
                ]
            return [
                child if isinstance(child, int) else child.wait()
                for child in children
            ]


def main(argv: list[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        sys.stderr.write(ERR_INPUT)
        return 1
    try:
        Pipeline(*args).run(os.environ)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\n")
        return exc.exit_status
    except PathNotFoundError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())