"""Constants for optclaim.

This module centralizes the token grammar and the process-level defaults
shared by the parsers, the usage renderer and the CLI.
"""

# ==================== TOKEN GRAMMAR ====================

SHORT_PREFIX: str = "-"
LONG_PREFIX: str = "--"
FILE_OPERAND: str = "-"  # Standalone token meaning "use stdin/stdout"
STOP_OPERAND: str = "--"  # Standalone token ending option processing
ASSIGNMENT_OPERAND: str = "="  # Splits --name=value at the first occurrence

# Characters of a "numeric-looking" token. Membership only, no structure check.
NUMERICAL_CHARACTERS: frozenset[str] = frozenset("0123456789.-")

# ==================== VALUE RANGES ====================

INTEGER_MIN: int = -(2**63)  # Signed 64-bit bounds for integer options
INTEGER_MAX: int = 2**63 - 1

# ==================== INVOCATION DEFAULTS ====================

DEFAULT_FROM_INDEX: int = 1  # Skip the program name in the argument vector
DEFAULT_COMMAND_INDEX: int = 1
DEFAULT_COMMAND_INVOCATION: str = "<command> [options]"

# ==================== EXIT STATUSES ====================

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1

# ==================== USAGE LAYOUT ====================

USAGE_TITLE: str = "usage:"
USAGE_OPTION_INDENT: str = "  "
USAGE_HELP_GAP: int = 3  # Spaces between the long flag column and the help text
COMMANDS_HEADING: str = "available commands:"

# ==================== LOGGING DEFAULTS ====================

LOG_LEVEL_ENV_VAR: str = "LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "INFO"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
