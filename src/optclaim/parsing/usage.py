"""Usage text and error line rendering.

Pure string formatting; the parsers decide when and where to print.
"""

from __future__ import annotations

from collections.abc import Sequence

from optclaim.core.constants import USAGE_HELP_GAP, USAGE_OPTION_INDENT, USAGE_TITLE
from optclaim.core.exceptions import ParserError
from optclaim.parsing.options import Option


def auto_invocation(options: Sequence[Option]) -> str:
    """Build an invocation line such as ``-i [-v] [--dry-run]``.

    Uses the short form when present, wraps optional options in brackets.
    """
    parts = []
    for option in options:
        form = option.flag.short or option.flag.long
        parts.append(form if option.is_required else f"[{form}]")
    return " ".join(parts)


def render_title(program: str, help_name: str | None = None) -> str:
    if help_name is None:
        return f"{USAGE_TITLE} {program} "
    return f"{USAGE_TITLE} {program} {help_name} "


def render_invocation(title: str, invocation: str) -> list[str]:
    """Prefix the first invocation line with title, align the rest under it."""
    indent = " " * len(title)
    return [(title if i == 0 else indent) + line for i, line in enumerate(invocation.split("\n"))]


def render_usage(
    program: str,
    options: Sequence[Option],
    invocation: str | None = None,
    help_name: str | None = None,
) -> str:
    """
    Render the full usage text for an option parser.

    Args:
        program: Program base name
        options: Registered options; only those with a help message are listed
        invocation: Invocation message, generated from the options when None
        help_name: Optional command name printed after the program name

    Returns:
        Usage text without a trailing newline.
    """
    if invocation is None:
        invocation = auto_invocation(options)

    lines = render_invocation(render_title(program, help_name), invocation)

    documented = [option for option in options if option.help_message is not None]
    short_width = max((len(option.flag.short or "") for option in documented), default=0)
    long_width = max((len(option.flag.long or "") for option in documented), default=0)
    gap = " " * USAGE_HELP_GAP

    for option in documented:
        short_label = (option.flag.short or "").ljust(short_width)
        long_label = (option.flag.long or "").ljust(long_width)
        lines.append(f"{USAGE_OPTION_INDENT}{short_label} {long_label}{gap}{option.help_message}")

    return "\n".join(lines)


def render_error(error: ParserError, name: str) -> str | None:
    """Return ``"<name>: <message>"``, or None for errors that print nothing."""
    if error.message is None:
        return None
    return f"{name}: {error.message}"
