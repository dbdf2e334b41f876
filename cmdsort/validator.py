"""Validate subcommand ordering for whole files.

Each call parses its input, finds every marked enum, resolves member names
and checks their order. Calls share no state, so files can be validated in
parallel.
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from cmdsort.exceptions import CmdsortError, ParseError, SourceIOError
from cmdsort.extractor import extract_declarations, parse_source
from cmdsort.logging import get_logger
from cmdsort.naming import resolve_name
from cmdsort.ordering import Diagnostic, check_order

logger = get_logger("validator")


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one source file."""

    path: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def conforms(self) -> bool:
        """True when no enum in the file is out of order."""
        return not self.diagnostics


@dataclass(frozen=True)
class FileResult:
    """Outcome or failure for one file of a batch."""

    path: str
    outcome: ValidationOutcome | None = None
    error: CmdsortError | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.outcome is not None and self.outcome.conforms


def validate_source(text: str, path: str | None = None) -> ValidationOutcome:
    """Validate every subcommand enum in a source string.

    Args:
        text: Python source code.
        path: Optional file identity for messages.

    Returns:
        ValidationOutcome with one diagnostic per unsorted enum.

    Raises:
        ParseError: If the text is not valid Python.
    """
    unit = parse_source(text, path)
    diagnostics: list[Diagnostic] = []

    for declaration in extract_declarations(unit):
        names = [resolve_name(member) for member in declaration.members]
        diagnostic = check_order(declaration.name, names, path=path, lineno=declaration.lineno)
        if diagnostic is not None:
            logger.debug(
                "Unsorted subcommands in %s",
                declaration.qualname,
                extra={"path": path or "<source>", "declaration": declaration.qualname},
            )
            diagnostics.append(diagnostic)

    return ValidationOutcome(path=path, diagnostics=tuple(diagnostics))


def read_source(path: str | Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        SourceIOError: If the file cannot be read or decoded.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(str(path), str(e)) from e


def validate_path(path: str | Path) -> ValidationOutcome:
    """Read a file and validate it.

    Raises:
        SourceIOError: If the file cannot be read.
        ParseError: If the file is not valid Python.
    """
    return validate_source(read_source(path), str(path))


def _validate_one(path: str) -> FileResult:
    try:
        return FileResult(path=path, outcome=validate_path(path))
    except (ParseError, SourceIOError) as e:
        logger.debug("Validation aborted: %s", e, extra={"path": path})
        return FileResult(path=path, error=e)


def validate_paths(paths: Iterable[str | Path], jobs: int = 1) -> list[FileResult]:
    """Validate several files independently.

    Read and parse failures are captured per file and never stop the batch.

    Args:
        paths: Files to validate.
        jobs: Number of worker threads.

    Returns:
        One FileResult per path, in input order.
    """
    targets = [str(p) for p in paths]
    if jobs <= 1 or len(targets) <= 1:
        return [_validate_one(p) for p in targets]

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(_validate_one, targets))


def assert_sorted(text: str, path: str | None = None) -> None:
    """Assert that every subcommand enum in the source is sorted.

    Intended for use inside test suites.

    Raises:
        AssertionError: Listing every unsorted enum.
        ParseError: If the text is not valid Python.
    """
    outcome = validate_source(text, path)
    if not outcome.conforms:
        raise AssertionError("\n\n".join(d.message for d in outcome.diagnostics))


def assert_path_sorted(path: str | Path) -> None:
    """Assert that every subcommand enum in a file is sorted.

    Raises:
        AssertionError: Listing every unsorted enum.
        SourceIOError: If the file cannot be read.
        ParseError: If the file is not valid Python.
    """
    assert_sorted(read_source(path), str(path))
