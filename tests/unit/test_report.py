"""Unit tests for result formatting."""

import json

import pytest

from cmdsort import __version__
from cmdsort.exceptions import ParseError, SourceIOError
from cmdsort.ordering import Diagnostic
from cmdsort.report import (
    format_file_result,
    format_json,
    format_results,
    format_sarif,
    format_text,
    overall_passed,
)
from cmdsort.validator import FileResult, ValidationOutcome

DIAGNOSTIC = Diagnostic(
    declaration="Commands",
    actual=("list", "add"),
    expected=("add", "list"),
    path="bad.py",
    lineno=5,
)


@pytest.fixture
def results() -> list[FileResult]:
    """One passing, one unsorted, one broken and one unreadable file."""
    return [
        FileResult(path="good.py", outcome=ValidationOutcome(path="good.py")),
        FileResult(path="bad.py", outcome=ValidationOutcome(path="bad.py", diagnostics=(DIAGNOSTIC,))),
        FileResult(path="broken.py", error=ParseError("broken.py", "invalid syntax", 2, 4)),
        FileResult(path="gone.py", error=SourceIOError("gone.py", "No such file or directory")),
    ]


class TestFormatText:
    """Tests for text output."""

    @pytest.mark.smoke
    def test_success_line(self, results: list[FileResult]) -> None:
        """Test a conforming file reports a single line."""
        assert format_file_result(results[0]) == "✓ good.py: All subcommand enums are sorted"

    @pytest.mark.smoke
    def test_failure_block(self, results: list[FileResult]) -> None:
        """Test an unsorted file reports a count then indented messages."""
        assert format_file_result(results[1]) == (
            "✗ bad.py: Found 1 error(s)\n"
            "  Enum 'Commands' has unsorted subcommands.\n"
            '  Actual order: ["list", "add"]\n'
            '  Expected order: ["add", "list"]'
        )

    def test_error_lines(self, results: list[FileResult]) -> None:
        """Test read and parse failures are single lines."""
        assert format_file_result(results[2]) == "✗ broken.py: Failed to parse broken.py:2:4: invalid syntax"
        assert format_file_result(results[3]) == "✗ gone.py: Cannot read gone.py: No such file or directory"

    def test_missing_outcome(self) -> None:
        """Test a result with neither outcome nor error is reported as failed."""
        assert format_file_result(FileResult(path="odd.py")) == "✗ odd.py: No result"

    def test_format_text_joins_files(self, results: list[FileResult]) -> None:
        """Test all files appear in order."""
        text = format_text(results)
        assert text.index("good.py") < text.index("bad.py") < text.index("broken.py")


class TestOverallPassed:
    """Tests for overall_passed."""

    def test_any_failure_fails(self, results: list[FileResult]) -> None:
        """Test one failing file fails the run."""
        assert not overall_passed(results)
        assert overall_passed(results[:1])

    def test_empty_passes(self) -> None:
        """Test no files is a pass."""
        assert overall_passed([])


class TestFormatJson:
    """Tests for JSON output."""

    def test_structure(self, results: list[FileResult]) -> None:
        """Test per-file entries and overall status."""
        data = json.loads(format_json(results))

        assert data["passed"] is False
        assert [f["path"] for f in data["files"]] == ["good.py", "bad.py", "broken.py", "gone.py"]
        assert data["files"][0] == {"path": "good.py", "conforms": True, "error": None, "diagnostics": []}

        bad = data["files"][1]
        assert bad["conforms"] is False
        assert bad["diagnostics"][0]["actual"] == ["list", "add"]
        assert bad["diagnostics"][0]["expected"] == ["add", "list"]
        assert bad["diagnostics"][0]["line"] == 5

        assert "invalid syntax" in data["files"][2]["error"]


class TestFormatSarif:
    """Tests for SARIF output."""

    def test_structure(self, results: list[FileResult]) -> None:
        """Test rules and locations of each finding."""
        sarif = json.loads(format_sarif(results))

        assert sarif["version"] == "2.1.0"
        run = sarif["runs"][0]
        assert run["tool"]["driver"]["name"] == "cmdsort"
        assert run["tool"]["driver"]["version"] == __version__

        rule_ids = [r["ruleId"] for r in run["results"]]
        assert rule_ids == ["unsorted-subcommands", "parse-error", "io-error"]

        unsorted = run["results"][0]
        location = unsorted["locations"][0]["physicalLocation"]
        assert location["artifactLocation"]["uri"] == "bad.py"
        assert location["region"]["startLine"] == 5

        io_location = run["results"][2]["locations"][0]["physicalLocation"]
        assert "region" not in io_location


class TestFormatResults:
    """Tests for format dispatch."""

    @pytest.mark.parametrize("fmt", ["json", "sarif"])
    def test_machine_formats_are_json(self, results: list[FileResult], fmt: str) -> None:
        """Test machine-readable formats produce valid JSON."""
        json.loads(format_results(results, fmt))

    def test_default_is_text(self, results: list[FileResult]) -> None:
        """Test text is the default."""
        assert format_results(results) == format_text(results)
