"""
optclaim - command-line option parsing by token claiming

Declare typed options, hand the parser an argument vector, and each option
claims its flag occurrences and values. Whatever nobody claims is reported
as unparsed arguments.

    >>> from optclaim import OptionParser, StringOption, FlagOption, ParserSetting
    >>> name = StringOption("n", "name")
    >>> verbose = FlagOption("v")
    >>> parser = OptionParser(name, verbose, settings=[ParserSetting.THROWS_ERRORS])
    >>> parser.parse(["prog", "-vv", "--name=world"])
    >>> name.value, verbose.count
    ('world', 2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from optclaim.core.lazy import make_lazy_exports
from optclaim.core.version import __version__

_EXPORTS = {
    # Parsers
    "OptionParser": "optclaim.parsing.parser",
    "CommandParser": "optclaim.parsing.commands",
    "Command": "optclaim.parsing.commands",
    "ProcessEnvironment": "optclaim.parsing.system",
    # Options
    "Flag": "optclaim.parsing.flag",
    "Option": "optclaim.parsing.options",
    "FlagOption": "optclaim.parsing.options",
    "StringOption": "optclaim.parsing.options",
    "OptionalStringOption": "optclaim.parsing.options",
    "IntegerOption": "optclaim.parsing.options",
    "DoubleOption": "optclaim.parsing.options",
    "ArrayOption": "optclaim.parsing.options",
    "EnumOption": "optclaim.parsing.options",
    "FileForReadingOption": "optclaim.parsing.files",
    "FileForWritingOption": "optclaim.parsing.files",
    "FileSystem": "optclaim.parsing.files",
    # Tokens
    "expand_arguments": "optclaim.parsing.tokens",
    # Configuration
    "ParserSetting": "optclaim.core.config",
    "ParserConfig": "optclaim.core.config",
    # Exceptions
    "OptClaimError": "optclaim.core.exceptions",
    "DeclarationError": "optclaim.core.exceptions",
    "ParserError": "optclaim.core.exceptions",
    "ParserErrorKind": "optclaim.core.exceptions",
    "NoInputError": "optclaim.core.exceptions",
    "MissingRequiredOptionError": "optclaim.core.exceptions",
    "MissingRequiredValueError": "optclaim.core.exceptions",
    "InvalidValueError": "optclaim.core.exceptions",
    "InvalidUsageError": "optclaim.core.exceptions",
    "UnparsedArgumentError": "optclaim.core.exceptions",
    "UnrecognizedCommandError": "optclaim.core.exceptions",
    "FileOptionError": "optclaim.core.exceptions",
    "FileOptionErrorKind": "optclaim.core.exceptions",
}

__all__ = ["__version__", *_EXPORTS]

__getattr__, __dir__ = make_lazy_exports(__name__, _EXPORTS)

if TYPE_CHECKING:
    from optclaim.core.config import ParserConfig, ParserSetting
    from optclaim.core.exceptions import (
        DeclarationError,
        FileOptionError,
        FileOptionErrorKind,
        InvalidUsageError,
        InvalidValueError,
        MissingRequiredOptionError,
        MissingRequiredValueError,
        NoInputError,
        OptClaimError,
        ParserError,
        ParserErrorKind,
        UnparsedArgumentError,
        UnrecognizedCommandError,
    )
    from optclaim.parsing.commands import Command, CommandParser
    from optclaim.parsing.files import FileForReadingOption, FileForWritingOption, FileSystem
    from optclaim.parsing.flag import Flag
    from optclaim.parsing.options import (
        ArrayOption,
        DoubleOption,
        EnumOption,
        FlagOption,
        IntegerOption,
        Option,
        OptionalStringOption,
        StringOption,
    )
    from optclaim.parsing.parser import OptionParser
    from optclaim.parsing.system import ProcessEnvironment
    from optclaim.parsing.tokens import expand_arguments
