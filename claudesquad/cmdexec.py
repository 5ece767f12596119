"""Running external commands through a replaceable executor."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Executor(Protocol):
    """Something that can run a command line."""

    def run(self, args: Sequence[str]) -> None:
        """Run the command and raise if it fails."""

    def output(self, args: Sequence[str]) -> bytes:
        """Run the command and return its standard output."""


class Exec:
    """Executor backed by real subprocesses."""

    def run(self, args: Sequence[str]) -> None:
        """Run the command; raise CalledProcessError on a non-zero exit."""
        subprocess.run(list(args), check=True)

    def output(self, args: Sequence[str]) -> bytes:
        """Run the command and return what it wrote to standard output."""
        return subprocess.check_output(list(args))


def make_executor() -> Executor:
    """Return the default executor."""
    return Exec()


def to_string(args: Sequence[str] | None) -> str:
    """Render a command line for messages and logs."""
    if args is None:
        return "<nil>"
    return " ".join(args)