"""Command dispatch: selects a sub-command from one argument position.

A ``CommandParser`` looks at a single token (the first argument by default),
answers help and version requests itself, and otherwise records which
``Command`` was named. Option parsing for the chosen command is left to an
``OptionParser`` started past that token.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from optclaim.core.colors import ConsoleColors
from optclaim.core.config import ParserSetting
from optclaim.core.constants import (
    COMMANDS_HEADING,
    DEFAULT_COMMAND_INDEX,
    DEFAULT_COMMAND_INVOCATION,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    USAGE_HELP_GAP,
    USAGE_OPTION_INDENT,
)
from optclaim.core.exceptions import DeclarationError, NoInputError, ParserError, UnrecognizedCommandError
from optclaim.parsing.system import ProcessEnvironment
from optclaim.parsing.tokens import in_single_quotes
from optclaim.parsing.usage import render_invocation, render_title

logger = logging.getLogger(__name__)


class Command:
    """A named sub-command and the action that runs it.

    Attributes:
        value: The token selecting this command, e.g. ``"build"``
        help_message: Description listed under "available commands"; None hides it
    """

    def __init__(self, value: str, help_message: str | None, action: Callable[[], object]):
        self.value = value
        self.help_message = help_message
        self._action = action

    def call(self) -> object:
        return self._action()

    def __repr__(self) -> str:
        return f"<Command {self.value!r}>"


class CommandParser:
    """Selects one of several commands from the argument vector."""

    def __init__(
        self,
        *commands: Command,
        invocation: str = DEFAULT_COMMAND_INVOCATION,
        help_argument: str | None = None,
        version_argument: str | None = None,
        version: str | None = None,
        settings: Iterable[ParserSetting] = (),
        environment: ProcessEnvironment | None = None,
    ):
        if version_argument is not None and version is None:
            raise DeclarationError(f"version argument {in_single_quotes(version_argument)} given without a version")

        self.commands: list[Command] = []
        for command in commands:
            self._add(command)

        self.invocation = invocation
        self.help_argument = help_argument
        self.version_argument = version_argument
        self.version = version
        self.settings = frozenset(settings)
        self.environment = environment if environment is not None else ProcessEnvironment()
        self.parsed_command: Command | None = None

    def _add(self, command: Command) -> None:
        if any(existing.value == command.value for existing in self.commands):
            raise DeclarationError(f"non-unique command value {in_single_quotes(command.value)}")
        self.commands.append(command)

    def usage(self, error_message: str | None = None) -> str:
        """Render the invocation line(s) and the list of documented commands."""
        lines = [] if error_message is None else [error_message]
        lines.extend(render_invocation(render_title(self.environment.program), self.invocation))
        lines.append("")
        lines.append(COMMANDS_HEADING)

        documented = [command for command in self.commands if command.help_message is not None]
        width = max((len(command.value) for command in documented), default=0) + USAGE_HELP_GAP
        for command in documented:
            lines.append(f"{USAGE_OPTION_INDENT}{command.value.ljust(width)}{command.help_message}")

        lines.append("")
        return "\n".join(lines)

    def parse(self, arguments: Sequence[str] | None = None, index: int = DEFAULT_COMMAND_INDEX) -> Command | None:
        """
        Select the command named at ``arguments[index]``.

        Returns:
            The parsed command. None only when the environment's terminate
            callable returns instead of exiting.

        Raises:
            ParserError: only with the THROWS_ERRORS setting.
        """
        environment = self.environment
        self.parsed_command = None

        if arguments is None:
            arguments = environment.arguments()

        try:
            if index >= len(arguments):
                raise NoInputError()

            value = arguments[index]

            if self.help_argument is not None and value == self.help_argument:
                environment.write_output(self.usage())
                environment.terminate(EXIT_SUCCESS)
                return None

            if self.version_argument is not None and value == self.version_argument:
                environment.write_output(self.version)
                environment.terminate(EXIT_SUCCESS)
                return None

            for command in self.commands:
                if command.value == value:
                    self.parsed_command = command

            if self.parsed_command is None:
                raise UnrecognizedCommandError(value)
        except ParserError as error:
            logger.debug(f"Command selection failed: {error.kind.value}")
            if ParserSetting.THROWS_ERRORS in self.settings:
                raise
            if error.message is not None:
                environment.write_error(ConsoleColors.error(error.message, environment.errors))
            environment.write_error(self.usage())
            environment.terminate(EXIT_FAILURE)
            return None

        logger.debug(f"Selected command {self.parsed_command.value!r}")
        return self.parsed_command
