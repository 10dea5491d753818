"""The ``optclaim`` command: show how an argument vector is expanded.

    $ optclaim -- -vf out.txt --name=x=y -3
    -v
    -f
    out.txt
    --name
    x=y
    -3

The tool's own options are parsed with OptionParser; everything after the
stop operand is the argument vector to inspect.
"""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum

from dotenv import find_dotenv, load_dotenv

from optclaim.core.colors import ConsoleColors
from optclaim.core.config import LogConfig, ParserSetting
from optclaim.core.constants import EXIT_FAILURE, EXIT_SUCCESS, VALID_LOG_LEVELS
from optclaim.core.exceptions import InvalidValueError, ParserError, UnparsedArgumentError
from optclaim.core.logging import setup_logging
from optclaim.parsing.options import EnumOption, FlagOption
from optclaim.parsing.parser import OptionParser
from optclaim.parsing.system import ProcessEnvironment
from optclaim.parsing.tokens import expand_arguments
from optclaim.parsing.usage import render_error

PROGRAM_NAME = "optclaim"

LogLevel = Enum("LogLevel", {level: level for level in VALID_LOG_LEVELS})


class LogFormat(Enum):
    TEXT = "text"
    JSON = "json"


class LogLevelOption(EnumOption):
    """Log level names, matched case-insensitively like ``LOG_LEVEL``."""

    def __init__(self, *flags: str, **kwargs):
        super().__init__(*flags, enum_type=LogLevel, **kwargs)

    def convert(self, argument: str) -> Enum:
        try:
            return super().convert(argument.upper())
        except InvalidValueError:
            raise InvalidValueError(self.description, argument) from None


class ExpandOptions:
    """The options accepted by the ``optclaim`` command."""

    def __init__(self):
        self.json = FlagOption("j", "json", help_message="print the tokens as a JSON array")
        self.log_level = LogLevelOption(
            "l", "log-level", help_message=f"log level ({', '.join(VALID_LOG_LEVELS)})"
        )
        self.log_format = EnumOption("log-format", enum_type=LogFormat, help_message="log output format (text, json)")

    def all(self) -> list:
        return [self.json, self.log_level, self.log_format]

    def log_config(self) -> LogConfig:
        config = LogConfig()
        if self.log_level.value is not None:
            config.level = self.log_level.value.value
        if self.log_format.value is not None:
            config.format = self.log_format.value.value
        return config


def build_parser(environment: ProcessEnvironment | None = None) -> tuple[OptionParser, ExpandOptions]:
    options = ExpandOptions()
    parser = OptionParser(
        *options.all(),
        invocation="[-j] [-l LEVEL] [--log-format FORMAT] -- ARGUMENT ...",
        settings=[ParserSetting.THROWS_ERRORS, ParserSetting.ALLOW_UNPARSED_OPTIONS],
        environment=environment if environment is not None else ProcessEnvironment(program_name=PROGRAM_NAME),
    )
    return parser, options


def main(argv: list[str] | None = None) -> int:
    """Entry point. ``argv`` excludes the program name; defaults to sys.argv[1:]."""
    load_dotenv(find_dotenv(usecwd=True))

    parser, options = build_parser()
    arguments = list(sys.argv[1:] if argv is None else argv)

    try:
        parser.parse(arguments, from_index=0)
        if parser.unclaimed_arguments:
            # Tokens to inspect must follow the stop operand
            raise UnparsedArgumentError(parser.unclaimed_arguments[0])
    except ParserError as error:
        message = render_error(error, PROGRAM_NAME)
        if message is not None:
            print(ConsoleColors.error(message, sys.stderr), file=sys.stderr)
        print(parser.usage(), file=sys.stderr)
        return EXIT_FAILURE

    log_config = options.log_config()
    # Without an explicit level, LOG_LEVEL (environment or .env) decides
    level = log_config.level if options.log_level.was_set else None
    logger = setup_logging(level, log_config.format)
    logging.getLogger(__name__).debug(f"Expanding {len(parser.stopped_arguments)} arguments")

    tokens = expand_arguments(parser.stopped_arguments)

    if options.json.value:
        print(json.dumps(tokens))
    else:
        for token in tokens:
            print(token)

    logger.debug(f"Printed {len(tokens)} tokens")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
