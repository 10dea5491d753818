"""Custom exceptions for optclaim.

Three families live here:

- DeclarationError: a programmer fault in how options or commands were declared.
  Raised once at setup and never caught by the parsers.
- ParserError: the closed set of user-input failures a parse cycle can report.
  Each carries the rendered option description rather than the option itself.
- FileOptionError: failures of the deferred path checks done by file options.
"""

from __future__ import annotations

from enum import Enum

from optclaim.core.constants import LONG_PREFIX, SHORT_PREFIX


def _quoted(text: str) -> str:
    return f"'{text}'"


class OptClaimError(Exception):
    """Base exception for all optclaim errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DeclarationError(OptClaimError):
    """Raised when options, flags or commands are declared incorrectly.

    Examples:
        - Flag names given with a leading '-' or '--'
        - Zero-length flag names
        - Two short or two long names for one option
        - The same flag registered by two options
        - The same command value registered twice
    """

    def __init__(self, message: str, names: list[str] | None = None, details: str | None = None):
        self.names = list(names) if names is not None else None
        if names is not None and details is None:
            details = f"flags: {self.names}"
        super().__init__(message, details)


class ParserErrorKind(Enum):
    """The closed set of parse failures."""

    NO_INPUT = "no_input"
    MISSING_REQUIRED_OPTION = "missing_required_option"
    MISSING_REQUIRED_VALUE = "missing_required_value"
    INVALID_VALUE = "invalid_value"
    INVALID_USAGE = "invalid_usage"
    UNPARSED_ARGUMENT = "unparsed_argument"
    UNRECOGNIZED_COMMAND = "unrecognized_command"


class ParserError(OptClaimError):
    """Base exception for user-input failures reported by a parse cycle.

    Attributes:
        kind: The ParserErrorKind of this failure
        option_description: Quoted flag forms of the offending option, if any
        argument: The offending token, if any
    """

    kind: ParserErrorKind

    def __init__(self, message: str | None, option_description: str | None = None, argument: str | None = None):
        self.option_description = option_description
        self.argument = argument
        super().__init__(message or "")
        # NoInputError has nothing to tell the user.
        self.message = message

    def __str__(self) -> str:
        return self.message or self.kind.value.replace("_", " ")


class NoInputError(ParserError):
    """Raised when there is nothing to parse. Rendered silently."""

    kind = ParserErrorKind.NO_INPUT

    def __init__(self):
        super().__init__(None)


class MissingRequiredOptionError(ParserError):
    """Raised when a required option was not supplied."""

    kind = ParserErrorKind.MISSING_REQUIRED_OPTION

    def __init__(self, option_description: str):
        super().__init__(f"missing required option {option_description}", option_description=option_description)


class MissingRequiredValueError(ParserError):
    """Raised when an option that needs a value was given none."""

    kind = ParserErrorKind.MISSING_REQUIRED_VALUE

    def __init__(self, option_description: str):
        super().__init__(f"option {option_description} requires a value", option_description=option_description)


class InvalidValueError(ParserError):
    """Raised when a claimed token cannot be converted to the option's type."""

    kind = ParserErrorKind.INVALID_VALUE

    def __init__(self, option_description: str, argument: str):
        super().__init__(
            f"invalid value {_quoted(argument)} for option {option_description}",
            option_description=option_description,
            argument=argument,
        )


class InvalidUsageError(ParserError):
    """Raised when a single-value option appears more than once."""

    kind = ParserErrorKind.INVALID_USAGE

    def __init__(self, option_description: str):
        super().__init__(f"invalid use of {option_description}", option_description=option_description)


class UnparsedArgumentError(ParserError):
    """Raised for a token that no option claimed.

    Options also raise it to refuse a token (a single-value option that already
    holds a value, a flag that takes none); the parser then leaves the token
    unclaimed instead of failing.
    """

    kind = ParserErrorKind.UNPARSED_ARGUMENT

    def __init__(self, argument: str):
        if argument.startswith(SHORT_PREFIX) or argument.startswith(LONG_PREFIX):
            message = f"unrecognized option {_quoted(argument)}"
        else:
            message = f"unparsed argument {_quoted(argument)}"
        super().__init__(message, argument=argument)


class UnrecognizedCommandError(ParserError):
    """Raised by the command parser for an unknown command value."""

    kind = ParserErrorKind.UNRECOGNIZED_COMMAND

    def __init__(self, command: str):
        super().__init__(f"unrecognized command {_quoted(command)}", argument=command)


class FileOptionErrorKind(Enum):
    """Failures of the path checks done by file options."""

    PATH_NOT_SET = "path not set"
    FILE_NOT_FOUND = "file not found at path {path}"
    IS_DIRECTORY = "path {path} is a directory"
    IS_NOT_READABLE = "path {path} is not readable"
    COULD_NOT_OPEN_FOR_READING = "could not open file for reading at path {path}"
    IS_NOT_WRITABLE = "path {path} is not writable"
    COULD_NOT_CREATE = "could not create file for writing at path {path}"
    COULD_NOT_OPEN_FOR_WRITING = "could not open file for writing at path {path}"


class FileOptionError(OptClaimError):
    """Exception raised when a file option's path cannot be used.

    Attributes:
        kind: FileOptionErrorKind describing the failed check
        option_description: Quoted flag forms of the file option
        path: The path that failed, None for PATH_NOT_SET
        original_error: The OSError that caused the failure, if any
    """

    def __init__(
        self,
        kind: FileOptionErrorKind,
        option_description: str,
        path: str | None = None,
        original_error: Exception | None = None,
    ):
        self.kind = kind
        self.option_description = option_description
        self.path = path
        self.original_error = original_error
        reason = kind.value.format(path=_quoted(path) if path is not None else "")
        super().__init__(f"{option_description} {reason}")
