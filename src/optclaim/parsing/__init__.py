"""Parsing module - flags, options, argument expansion and the parsers."""

from optclaim.parsing.flag import Flag
from optclaim.parsing.tokens import (
    expand_arguments,
    has_long_prefix,
    has_short_prefix,
    in_single_quotes,
    is_numerical,
    is_option,
)
from optclaim.parsing.options import (
    ArrayOption,
    DoubleOption,
    EnumOption,
    FlagOption,
    IntegerOption,
    Option,
    OptionalStringOption,
    SingleValueOption,
    StringOption,
)
from optclaim.parsing.files import (
    FileForReadingOption,
    FileForWritingOption,
    FileOption,
    FileSystem,
)
from optclaim.parsing.system import ProcessEnvironment
from optclaim.parsing.usage import auto_invocation, render_error, render_usage
from optclaim.parsing.parser import OptionParser
from optclaim.parsing.commands import Command, CommandParser

__all__ = [
    "ArrayOption",
    "Command",
    "CommandParser",
    "DoubleOption",
    "EnumOption",
    "FileForReadingOption",
    "FileForWritingOption",
    "FileOption",
    "FileSystem",
    "Flag",
    "FlagOption",
    "IntegerOption",
    "Option",
    "OptionParser",
    "OptionalStringOption",
    "ProcessEnvironment",
    "SingleValueOption",
    "StringOption",
    "auto_invocation",
    "expand_arguments",
    "has_long_prefix",
    "has_short_prefix",
    "in_single_quotes",
    "is_numerical",
    "is_option",
    "render_error",
    "render_usage",
]
