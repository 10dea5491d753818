"""Typed options and their claim/reset protocol.

An option owns a Flag and a value slot. The parser hands it tokens through
``claim_value``: with no argument when the flag occurrence is followed by
nothing it could take, otherwise once per candidate token. Options raise
``UnparsedArgumentError`` to refuse a token, which the parser treats as
"leave it for later", and any other ParserError to abort the parse.

``reset`` restores the declaration-time default so one instance can serve
many sequential parse cycles.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from optclaim.core.constants import INTEGER_MAX, INTEGER_MIN
from optclaim.core.exceptions import (
    InvalidValueError,
    MissingRequiredValueError,
    UnparsedArgumentError,
)
from optclaim.parsing.flag import Flag
from optclaim.parsing.tokens import in_single_quotes

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Option:
    """Base class for all options.

    Attributes:
        flag: The Flag identifying this option on the command line
        help_message: Text shown in usage output; options without one are not listed
        is_required: Fail the parse when the option is absent
        value_is_optional: The flag may appear without a value
        default: Value restored by ``reset``
        value: Current value
        was_set: True once the option was claimed during the current cycle
    """

    single_value = False

    def __init__(
        self,
        *flags: str,
        help_message: str | None = None,
        required: bool = False,
        value_is_optional: bool = False,
        default: Any = None,
    ):
        self.flag = Flag.from_names(flags)
        self.help_message = help_message
        self.is_required = required
        self.value_is_optional = value_is_optional
        self.default = default
        self.value: Any = copy.copy(default)
        self.was_set = False

    @property
    def description(self) -> str:
        """The flag forms in single quotes, e.g. ``'-o, --output'``."""
        return in_single_quotes(str(self.flag))

    def claim_value(self, argument: str | None = None) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement claim_value()")

    def reset(self) -> None:
        self.value = copy.copy(self.default)
        self.was_set = False

    def _claim_without_value(self) -> None:
        if not self.value_is_optional:
            raise MissingRequiredValueError(self.description)
        self.was_set = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.flag} value={self.value!r} was_set={self.was_set}>"


class FlagOption(Option):
    """A boolean switch that also counts its occurrences.

    ``-vvv`` yields ``value is True`` and ``count == 3``. A token following the
    flag is refused, after the occurrence itself has been counted.
    """

    def __init__(self, *flags: str, help_message: str | None = None, required: bool = False):
        super().__init__(*flags, help_message=help_message, required=required, default=False)
        self.count = 0

    def claim_value(self, argument: str | None = None) -> None:
        self.value = True
        self.count += 1
        self.was_set = True
        if argument is not None:
            raise UnparsedArgumentError(argument)

    def reset(self) -> None:
        super().reset()
        self.count = 0


class SingleValueOption(Option):
    """An option holding one converted value per parse cycle.

    A second value token is refused with ``UnparsedArgumentError`` so the
    parser can report it as a leftover. Subclasses implement ``convert``.
    """

    single_value = True

    def __init__(self, *flags: str, **kwargs: Any):
        super().__init__(*flags, **kwargs)
        self._claimed = False

    def convert(self, argument: str) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement convert()")

    def claim_value(self, argument: str | None = None) -> None:
        if argument is None:
            self._claim_without_value()
            return

        if self._claimed:
            raise UnparsedArgumentError(argument)

        self.value = self.convert(argument)
        self._claimed = True
        self.was_set = True

    def reset(self) -> None:
        super().reset()
        self._claimed = False


class StringOption(SingleValueOption):
    def convert(self, argument: str) -> str:
        return argument


class OptionalStringOption(StringOption):
    """A string option whose flag may be given without a value."""

    def __init__(self, *flags: str, help_message: str | None = None, required: bool = False, default: Any = None):
        super().__init__(
            *flags, help_message=help_message, required=required, value_is_optional=True, default=default
        )


class IntegerOption(SingleValueOption):
    """Decimal integers with an optional sign, within the signed 64-bit range."""

    def convert(self, argument: str) -> int:
        if not _INTEGER_PATTERN.fullmatch(argument):
            raise InvalidValueError(self.description, argument)
        value = int(argument)
        if not INTEGER_MIN <= value <= INTEGER_MAX:
            raise InvalidValueError(self.description, argument)
        return value


class DoubleOption(SingleValueOption):
    """ASCII decimal or exponent notation, plus ``inf`` and ``nan``."""

    def convert(self, argument: str) -> float:
        if not _DOUBLE_PATTERN.fullmatch(argument):
            raise InvalidValueError(self.description, argument)
        return float(argument)


class EnumOption(SingleValueOption):
    """Maps a token to the member of ``enum_type`` whose value renders as it.

    Example:
        >>> class Color(Enum):
        ...     RED = "red"
        >>> option = EnumOption("c", "color", enum_type=Color)
        >>> option.claim_value("red")
        >>> option.value
        <Color.RED: 'red'>
    """

    def __init__(self, *flags: str, enum_type: type[Enum], **kwargs: Any):
        super().__init__(*flags, **kwargs)
        self.enum_type = enum_type
        self._members = {str(member.value): member for member in enum_type}

    @property
    def choices(self) -> list[str]:
        return list(self._members)

    def convert(self, argument: str) -> Enum:
        try:
            return self._members[argument]
        except KeyError:
            raise InvalidValueError(self.description, argument) from None


class ArrayOption(Option):
    """Collects every value token following each occurrence.

    Elements are converted with ``kind`` (``str`` by default). The value is
    the default (None unless given) until the first element is claimed. With
    ``value_is_optional`` a bare occurrence resets the value to an empty list.
    """

    def __init__(
        self,
        *flags: str,
        kind: Callable[[str], Any] = str,
        help_message: str | None = None,
        required: bool = False,
        value_is_optional: bool = False,
        default: list[Any] | None = None,
    ):
        super().__init__(
            *flags,
            help_message=help_message,
            required=required,
            value_is_optional=value_is_optional,
            default=default,
        )
        self.kind = kind

    def claim_value(self, argument: str | None = None) -> None:
        if argument is None:
            self._claim_without_value()
            self.value = []
            return

        try:
            element = self.kind(argument)
        except (TypeError, ValueError):
            raise InvalidValueError(self.description, argument) from None

        # Claimed elements replace the default rather than extend it
        if not self.was_set or self.value is None:
            self.value = []
        self.value.append(element)
        self.was_set = True
