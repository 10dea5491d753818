"""Option parser: distributes expanded tokens to the options that claim them.

A parse cycle runs in a fixed order:

1. Reset every option and expand the raw arguments.
2. Move everything after the first stop operand ``--`` aside, verbatim.
3. For each option, in declaration order, find its flag occurrences and feed
   each one the run of following tokens that do not look like options.
4. What nobody claimed, followed by the stopped tokens, is the unparsed result.
5. Check required options, then leftovers.

Any ParserError ends the cycle. Depending on the ``THROWS_ERRORS`` setting it is
re-raised or printed with the usage text before the process exits with status 1.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Sequence

from optclaim.core.colors import ConsoleColors
from optclaim.core.config import ParserConfig, ParserSetting
from optclaim.core.constants import EXIT_FAILURE, STOP_OPERAND
from optclaim.core.exceptions import (
    DeclarationError,
    InvalidUsageError,
    MissingRequiredOptionError,
    NoInputError,
    ParserError,
    UnparsedArgumentError,
)
from optclaim.parsing.options import Option
from optclaim.parsing.system import ProcessEnvironment
from optclaim.parsing.tokens import expand_arguments, in_single_quotes, is_option
from optclaim.parsing.usage import auto_invocation, render_error, render_usage

logger = logging.getLogger(__name__)


class OptionParser:
    """Parses an argument vector against a fixed, ordered set of options.

    Attributes:
        options: Registered options in declaration order
        unclaimed_arguments: Working token list of the last cycle, stop operand excluded
        stopped_arguments: Tokens that followed the stop operand in the last cycle
        unparsed_arguments: Unclaimed tokens followed by stopped tokens
    """

    def __init__(
        self,
        *options: Option,
        help_name: str | None = None,
        invocation: str | None = None,
        settings: Iterable[ParserSetting] = (),
        environment: ProcessEnvironment | None = None,
        config: ParserConfig | None = None,
    ):
        if config is None:
            config = ParserConfig.from_settings(settings, help_name=help_name, invocation=invocation)
        self.config = config
        self.environment = environment if environment is not None else ProcessEnvironment()
        self.options: list[Option] = []
        self.unclaimed_arguments: list[str] = []
        self.stopped_arguments: list[str] = []
        self.unparsed_arguments: list[str] = []
        self.set_options(options)

    @property
    def help_name(self) -> str | None:
        return self.config.help_name

    @property
    def invocation_message(self) -> str:
        if self.config.invocation is not None:
            return self.config.invocation
        return auto_invocation(self.options)

    def set_invocation_message(self, message: str | None) -> None:
        self.config = dataclasses.replace(self.config, invocation=message)

    def set_options(self, options: Sequence[Option]) -> None:
        """Replace the registered options.

        Raises:
            DeclarationError: two options share a short or long form.
        """
        seen: set[str] = set()
        for option in options:
            for form in option.flag.values:
                if form in seen:
                    raise DeclarationError(f"non-unique flag {in_single_quotes(form)}")
                seen.add(form)

        self.options = list(options)
        for option in self.options:
            option.reset()

    def usage(self) -> str:
        return render_usage(self.environment.program, self.options, self.invocation_message, self.help_name)

    def parse(self, arguments: Sequence[str] | None = None, from_index: int | None = None) -> None:
        """
        Run one parse cycle.

        Args:
            arguments: Full argument vector; the environment's (sys.argv) when None
            from_index: Leading entries to skip, normally the program name (default: 1)

        Raises:
            ParserError: only when the THROWS_ERRORS setting is enabled. Otherwise a
                failure is reported on the error stream and the environment terminates
                the process.
        """
        try:
            self._parse(arguments, from_index)
        except ParserError as error:
            logger.debug(f"Parse failed: {error.kind.value}", extra={"argument": error.argument})
            if self.config.throws_errors:
                raise
            self._report(error)

    def _report(self, error: ParserError) -> None:
        environment = self.environment
        message = render_error(error, self.help_name or environment.program)
        if message is not None:
            environment.write_error(ConsoleColors.error(message, environment.errors))
        environment.write_error(self.usage())
        environment.terminate(EXIT_FAILURE)

    def _reset(self) -> None:
        self.unclaimed_arguments = []
        self.stopped_arguments = []
        self.unparsed_arguments = []
        for option in self.options:
            option.reset()

    def _parse(self, arguments: Sequence[str] | None, from_index: int | None) -> None:
        self._reset()

        if arguments is None:
            arguments = self.environment.arguments()
        if from_index is None:
            from_index = self.config.from_index

        self.unclaimed_arguments = expand_arguments(list(arguments)[from_index:])
        logger.debug(
            f"Expanded {max(len(arguments) - from_index, 0)} arguments into {len(self.unclaimed_arguments)} tokens",
            extra={"tokens": list(self.unclaimed_arguments)},
        )

        if not self.unclaimed_arguments and not self.config.has(ParserSetting.IGNORE_NO_INPUT):
            raise NoInputError()

        self._extract_stopped_arguments()

        for option in self.options:
            self._claim(option)

        self.unparsed_arguments = self.unclaimed_arguments + self.stopped_arguments

        for option in self.options:
            if option.is_required and not option.was_set:
                raise MissingRequiredOptionError(option.description)

        if self.unparsed_arguments and not self.config.has(ParserSetting.ALLOW_UNPARSED_OPTIONS):
            raise UnparsedArgumentError(self.unparsed_arguments[0])

    def _extract_stopped_arguments(self) -> None:
        # Only the first stop operand separates; later ones are ordinary stopped tokens
        if STOP_OPERAND not in self.unclaimed_arguments:
            return
        stop_index = self.unclaimed_arguments.index(STOP_OPERAND)
        self.stopped_arguments = self.unclaimed_arguments[stop_index + 1:]
        del self.unclaimed_arguments[stop_index:]

    def _claim_window(self, occurrence: int) -> range:
        """Indices after an occurrence up to the next option-like token."""
        tokens = self.unclaimed_arguments
        end = occurrence + 1
        while end < len(tokens) and not is_option(tokens[end]):
            end += 1
        return range(occurrence + 1, end)

    def _claim(self, option: Option) -> None:
        tokens = self.unclaimed_arguments
        occurrences = [index for index, token in enumerate(tokens) if token in option.flag]
        if not occurrences:
            return

        if len(occurrences) > 1 and option.single_value and not self.config.has(ParserSetting.IGNORE_SINGLE_VALUE):
            raise InvalidUsageError(option.description)

        claimed: list[int] = []
        for occurrence in occurrences:
            window = self._claim_window(occurrence)
            if not window:
                option.claim_value()
                continue

            for index in window:
                try:
                    option.claim_value(tokens[index])
                except UnparsedArgumentError:
                    # Refused, e.g. a second value for a single-value option
                    break
                claimed.append(index)

        for index in sorted(set(occurrences + claimed), reverse=True):
            del tokens[index]

        logger.debug(f"{option.description} claimed {len(claimed)} value(s) from {len(occurrences)} occurrence(s)")
