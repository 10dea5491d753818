"""Configuration dataclasses for optclaim.

These dataclasses centralize the parser and logging settings for type safety
and easy testing. They can be built from keyword arguments or used directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from optclaim.core.constants import DEFAULT_FROM_INDEX, DEFAULT_LOG_LEVEL


class ParserSetting(Enum):
    """Behaviour switches accepted by the parsers."""

    ALLOW_UNPARSED_OPTIONS = "allow_unparsed_options"  # Leftover tokens are not an error
    IGNORE_NO_INPUT = "ignore_no_input"  # Empty input parses cleanly
    IGNORE_SINGLE_VALUE = "ignore_single_value"  # Single-value options may repeat
    THROWS_ERRORS = "throws_errors"  # Raise ParserError instead of printing and exiting


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for a parser instance.

    Attributes:
        settings: Enabled ParserSetting switches
        help_name: Optional per-command name shown in usage and error lines
        invocation: Explicit invocation message; generated from the options when None
        from_index: Number of leading argument vector entries to skip (default: 1)
    """

    settings: frozenset[ParserSetting] = field(default_factory=frozenset)
    help_name: str | None = None
    invocation: str | None = None
    from_index: int = DEFAULT_FROM_INDEX

    @classmethod
    def from_settings(
        cls,
        settings: Iterable[ParserSetting] = (),
        help_name: str | None = None,
        invocation: str | None = None,
        from_index: int = DEFAULT_FROM_INDEX,
    ) -> ParserConfig:
        """Create a configuration from any iterable of settings."""
        return cls(
            settings=frozenset(ParserSetting(setting) for setting in settings),
            help_name=help_name,
            invocation=invocation,
            from_index=from_index,
        )

    def has(self, setting: ParserSetting) -> bool:
        """Check whether a setting is enabled."""
        return setting in self.settings

    @property
    def throws_errors(self) -> bool:
        return ParserSetting.THROWS_ERRORS in self.settings


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "INFO")
        format: Output format, "text" or "json" (default: "text")
    """

    level: str = DEFAULT_LOG_LEVEL
    format: str = "text"
