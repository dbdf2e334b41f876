"""Render batch validation results as text, JSON or SARIF."""

from __future__ import annotations

import json
import textwrap
from collections.abc import Sequence
from typing import Any

from cmdsort import __version__
from cmdsort.constants import OutputFormat, RuleId
from cmdsort.exceptions import ParseError, SourceIOError
from cmdsort.validator import FileResult

SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"

SUCCESS_MARK = "✓"
FAILURE_MARK = "✗"


def format_file_result(result: FileResult) -> str:
    """Format one file's result for the terminal.

    A conforming file is a single success line. A failing file is a count
    line followed by each diagnostic message indented by two spaces.
    """
    if result.error is not None:
        return f"{FAILURE_MARK} {result.path}: {result.error}"

    if result.outcome is None:
        return f"{FAILURE_MARK} {result.path}: No result"

    diagnostics = result.outcome.diagnostics
    if not diagnostics:
        return f"{SUCCESS_MARK} {result.path}: All subcommand enums are sorted"

    lines = [f"{FAILURE_MARK} {result.path}: Found {len(diagnostics)} error(s)"]
    lines.extend(textwrap.indent(d.message, "  ") for d in diagnostics)
    return "\n".join(lines)


def format_text(results: Sequence[FileResult]) -> str:
    """Format all results as plain text."""
    return "\n".join(format_file_result(r) for r in results)


def overall_passed(results: Sequence[FileResult]) -> bool:
    """Check if every file conforms."""
    return all(r.passed for r in results)


def format_json(results: Sequence[FileResult]) -> str:
    """Format as JSON."""
    files: list[dict[str, Any]] = []
    for r in results:
        files.append(
            {
                "path": r.path,
                "conforms": r.passed,
                "error": str(r.error) if r.error is not None else None,
                "diagnostics": [d.to_dict() for d in r.outcome.diagnostics] if r.outcome else [],
            }
        )
    data = {"files": files, "passed": overall_passed(results)}
    return json.dumps(data, indent=2, ensure_ascii=False)


def _location(path: str, line: int | None) -> dict[str, Any]:
    physical: dict[str, Any] = {"artifactLocation": {"uri": path}}
    if line is not None:
        physical["region"] = {"startLine": line}
    return {"physicalLocation": physical}


def format_sarif(results: Sequence[FileResult]) -> str:
    """Format as SARIF for code-scanning integration."""
    sarif_results: list[dict[str, Any]] = []
    sarif: dict[str, Any] = {
        "$schema": SARIF_SCHEMA,
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "cmdsort",
                        "version": __version__,
                        "rules": [{"id": rule.value} for rule in RuleId],
                    }
                },
                "results": sarif_results,
            }
        ],
    }

    for r in results:
        if isinstance(r.error, ParseError):
            sarif_results.append(
                {
                    "ruleId": RuleId.PARSE_ERROR.value,
                    "level": "error",
                    "message": {"text": r.error.description},
                    "locations": [_location(r.path, r.error.lineno)],
                }
            )
        elif isinstance(r.error, SourceIOError):
            sarif_results.append(
                {
                    "ruleId": RuleId.IO_ERROR.value,
                    "level": "error",
                    "message": {"text": r.error.reason},
                    "locations": [_location(r.path, None)],
                }
            )
        elif r.outcome is not None:
            for d in r.outcome.diagnostics:
                sarif_results.append(
                    {
                        "ruleId": RuleId.UNSORTED_SUBCOMMANDS.value,
                        "level": "error",
                        "message": {"text": d.message},
                        "locations": [_location(r.path, d.lineno)],
                    }
                )

    return json.dumps(sarif, indent=2, ensure_ascii=False)


def format_results(results: Sequence[FileResult], fmt: str = OutputFormat.TEXT.value) -> str:
    """Format results in the requested output format."""
    if fmt == OutputFormat.JSON.value:
        return format_json(results)
    elif fmt == OutputFormat.SARIF.value:
        return format_sarif(results)
    return format_text(results)
