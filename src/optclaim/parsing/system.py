"""Process-level collaborators used by the parsers.

Reading ``sys.argv``, writing diagnostics and exiting all go through a
``ProcessEnvironment`` so the parsers can be driven from tests without
touching the real process.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn, TextIO


def _system_arguments() -> list[str]:
    return list(sys.argv)


def _system_exit(status: int) -> NoReturn:
    sys.exit(status)


@dataclass
class ProcessEnvironment:
    """Argument source, output streams and termination for a parser.

    Attributes:
        arguments: Callable returning the full argument vector (default: sys.argv)
        stdout: Stream for requested output such as help and version text
        stderr: Stream for error messages and usage on failure
        terminate: Called with the exit status; must not return for real processes
        program_name: Overrides the base name derived from the first argument
    """

    arguments: Callable[[], list[str]] = _system_arguments
    stdout: TextIO | None = None
    stderr: TextIO | None = None
    terminate: Callable[[int], None] = _system_exit
    program_name: str | None = None

    @property
    def output(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    @property
    def errors(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    @property
    def program(self) -> str:
        """Base name of the running program."""
        if self.program_name is not None:
            return self.program_name
        argv = self.arguments()
        return os.path.basename(argv[0]) if argv else ""

    def write_error(self, text: str) -> None:
        self.errors.write(text + "\n")

    def write_output(self, text: str) -> None:
        self.output.write(text + "\n")
