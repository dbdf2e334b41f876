"""cmdsort - keep CLI subcommand enums sorted.

Static checker for Python enums that declare a command-line tool's
subcommands.
"""

__version__ = "0.1.0"
__author__ = "cmdsort Team"

from cmdsort.exceptions import CmdsortError, ConfigurationError, ParseError, SourceIOError
from cmdsort.markers import command, command_name, subcommands
from cmdsort.naming import to_kebab_case
from cmdsort.ordering import Diagnostic
from cmdsort.validator import (
    FileResult,
    ValidationOutcome,
    assert_path_sorted,
    assert_sorted,
    validate_path,
    validate_paths,
    validate_source,
)

__all__ = [
    "__version__",
    # Engine
    "validate_source",
    "validate_path",
    "validate_paths",
    "assert_sorted",
    "assert_path_sorted",
    "Diagnostic",
    "FileResult",
    "ValidationOutcome",
    "to_kebab_case",
    # Markers
    "command",
    "command_name",
    "subcommands",
    # Errors
    "CmdsortError",
    "ConfigurationError",
    "ParseError",
    "SourceIOError",
]
