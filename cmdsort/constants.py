"""cmdsort constants and enumerations."""

from enum import Enum, IntEnum

# Class decorator marking an enum as a source of CLI subcommands
MARKER_NAMES: frozenset[str] = frozenset({"subcommands"})

# Member value calls that may carry an explicit command name
OVERRIDE_CALL_NAMES: frozenset[str] = frozenset({"command"})

# Keyword of the override call holding the explicit name
OVERRIDE_NAME_KEY: str = "name"

# Base classes that make a class enumeration-shaped
ENUM_BASE_NAMES: frozenset[str] = frozenset({"Enum", "IntEnum", "StrEnum", "Flag", "IntFlag"})

# Any base whose name ends with this suffix is also treated as an enum
ENUM_BASE_SUFFIX: str = "Enum"

# Enum helpers that wrap a member value
MEMBER_WRAPPER_NAMES: frozenset[str] = frozenset({"member"})
NONMEMBER_WRAPPER_NAMES: frozenset[str] = frozenset({"nonmember"})

# Default configuration file, relative to the working directory
DEFAULT_CONFIG_PATH: str = ".cmdsort.yaml"

# Directory names skipped while expanding directory arguments
DEFAULT_EXCLUDES: tuple[str, ...] = (
    "__pycache__",
    "build",
    "dist",
    "node_modules",
    "site-packages",
    "venv",
)

SOURCE_SUFFIX: str = ".py"

DEFAULT_JOBS: int = 1
MAX_JOBS: int = 64


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    FAILED = 1


class OutputFormat(Enum):
    """Report output formats."""

    TEXT = "text"
    JSON = "json"
    SARIF = "sarif"


class RuleId(Enum):
    """Rule identifiers used in machine-readable reports."""

    UNSORTED_SUBCOMMANDS = "unsorted-subcommands"
    PARSE_ERROR = "parse-error"
    IO_ERROR = "io-error"
