"""Console colors for optclaim diagnostics.

Provides ANSI styling for error and usage output with auto-detection
of TTY support and Windows compatibility.
"""

import os
import re
import sys
from typing import TextIO


class ConsoleColors:
    """ANSI color codes for terminal output.

    Styling is applied per stream: a parser writing usage text to a pipe or a
    captured buffer gets plain text, a terminal gets color. The ``NO_COLOR``
    environment variable disables color everywhere.
    """

    RED = '\033[91m'
    YELLOW = '\033[93m'
    RESET = '\033[0m'
    ANSI_ESCAPE = re.compile(r'\033\[[0-9;]*m')

    # None means "decide per stream"
    _forced: bool | None = None

    @classmethod
    def force(cls, enabled: bool | None) -> None:
        """Force colors on or off; None restores per-stream detection."""
        cls._forced = enabled

    @classmethod
    def is_enabled(cls, stream: TextIO | None = None) -> bool:
        """Check if colors should be used when writing to stream."""
        if cls._forced is not None:
            return cls._forced
        if os.environ.get('NO_COLOR'):
            return False
        stream = stream if stream is not None else sys.stdout
        isatty = getattr(stream, 'isatty', None)
        if isatty is None or not isatty():
            return False
        return os.name != 'nt' or bool(os.environ.get('TERM'))

    @classmethod
    def _wrap(cls, code: str, text: str, stream: TextIO | None) -> str:
        if cls.is_enabled(stream):
            return f"{code}{text}{cls.RESET}"
        return text

    @classmethod
    def error(cls, text: str, stream: TextIO | None = None) -> str:
        """Format text as error (red)"""
        return cls._wrap(cls.RED, text, stream)

    @classmethod
    def warning(cls, text: str, stream: TextIO | None = None) -> str:
        """Format text as warning (yellow)"""
        return cls._wrap(cls.YELLOW, text, stream)

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove ANSI escape codes."""
        return cls.ANSI_ESCAPE.sub('', text)
