"""Token classification and argument expansion.

``expand_arguments`` normalizes a raw argument vector without looking at any
option declarations: short flag clusters are exploded, ``--name=value`` is
split, and everything after the stop operand is passed through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable

from optclaim.core.constants import (
    ASSIGNMENT_OPERAND,
    FILE_OPERAND,
    LONG_PREFIX,
    NUMERICAL_CHARACTERS,
    SHORT_PREFIX,
    STOP_OPERAND,
)


def is_numerical(token: str) -> bool:
    """Return True when every character is a digit, '.' or '-'.

    Membership only: ``--5`` and ``-.`` qualify, and negative numbers are
    never read as flags.
    """
    return NUMERICAL_CHARACTERS.issuperset(token)


def has_short_prefix(token: str) -> bool:
    return token.startswith(SHORT_PREFIX)


def has_long_prefix(token: str) -> bool:
    return token.startswith(LONG_PREFIX)


def is_option(token: str) -> bool:
    """Return True when the token looks like a flag rather than a value."""
    return not is_numerical(token) and (has_short_prefix(token) or has_long_prefix(token))


def in_single_quotes(text: str) -> str:
    return f"'{text}'"


def expand_arguments(arguments: Iterable[str]) -> list[str]:
    """
    Normalize raw arguments into one token per flag or value.

    Args:
        arguments: The argument vector, program name already removed.

    Returns:
        The expanded token list. Empty strings before the stop operand are
        dropped; tokens after it are kept verbatim, empty strings included.

    Examples:
        >>> expand_arguments(["-abc", "--name=x=y", "-3", "--", "-de"])
        ['-a', '-b', '-c', '--name', 'x=y', '-3', '--', '-de']
    """
    expanded: list[str] = []
    stopped = False

    for argument in arguments:
        if stopped:
            expanded.append(argument)
            continue

        if not argument:
            continue

        if argument == STOP_OPERAND:
            expanded.append(argument)
            stopped = True
            continue

        if argument in (FILE_OPERAND, SHORT_PREFIX, LONG_PREFIX):
            expanded.append(argument)
            continue

        if has_long_prefix(argument):
            # --name=value splits at the first '='; empty halves are dropped
            expanded.extend(part for part in argument.split(ASSIGNMENT_OPERAND, 1) if part)
            continue

        if has_short_prefix(argument):
            if is_numerical(argument):
                expanded.append(argument)
                continue
            expanded.extend(SHORT_PREFIX + character for character in argument[len(SHORT_PREFIX):])
            continue

        expanded.append(argument)

    return expanded
