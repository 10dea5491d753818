"""Core module - Foundation components with no dependency on the parsing layer.

This module provides the basic building blocks used throughout the package:
- Version information
- Custom exceptions
- Configuration dataclasses
- Token grammar constants
- Console colors
"""

from optclaim.core.version import __version__

from optclaim.core.exceptions import (
    OptClaimError,
    DeclarationError,
    ParserErrorKind,
    ParserError,
    NoInputError,
    MissingRequiredOptionError,
    MissingRequiredValueError,
    InvalidValueError,
    InvalidUsageError,
    UnparsedArgumentError,
    UnrecognizedCommandError,
    FileOptionErrorKind,
    FileOptionError,
)

from optclaim.core.config import (
    ParserSetting,
    ParserConfig,
    LogConfig,
)

from optclaim.core.constants import (
    SHORT_PREFIX,
    LONG_PREFIX,
    FILE_OPERAND,
    STOP_OPERAND,
    ASSIGNMENT_OPERAND,
    NUMERICAL_CHARACTERS,
    DEFAULT_FROM_INDEX,
    EXIT_SUCCESS,
    EXIT_FAILURE,
)

from optclaim.core.colors import ConsoleColors

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'OptClaimError',
    'DeclarationError',
    'ParserErrorKind',
    'ParserError',
    'NoInputError',
    'MissingRequiredOptionError',
    'MissingRequiredValueError',
    'InvalidValueError',
    'InvalidUsageError',
    'UnparsedArgumentError',
    'UnrecognizedCommandError',
    'FileOptionErrorKind',
    'FileOptionError',
    # Config
    'ParserSetting',
    'ParserConfig',
    'LogConfig',
    # Constants
    'SHORT_PREFIX',
    'LONG_PREFIX',
    'FILE_OPERAND',
    'STOP_OPERAND',
    'ASSIGNMENT_OPERAND',
    'NUMERICAL_CHARACTERS',
    'DEFAULT_FROM_INDEX',
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    # Colors
    'ConsoleColors',
]
