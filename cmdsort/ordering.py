"""Canonical ordering of effective command names."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """One subcommand enum whose members are out of order."""

    declaration: str
    actual: tuple[str, ...]
    expected: tuple[str, ...]
    path: str | None = None
    lineno: int | None = None

    @property
    def message(self) -> str:
        """Human-readable description with both orderings."""
        return (
            f"Enum '{self.declaration}' has unsorted subcommands.\n"
            f"Actual order: {_render_names(self.actual)}\n"
            f"Expected order: {_render_names(self.expected)}"
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "declaration": self.declaration,
            "line": self.lineno,
            "actual": list(self.actual),
            "expected": list(self.expected),
            "message": self.message,
        }


def _render_names(names: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(name, ensure_ascii=False) for name in names) + "]"


def canonical_order(names: Sequence[str]) -> tuple[str, ...]:
    """Sort names ascending by code point.

    Code point order equals byte order of the UTF-8 encoding, and the sort
    is stable.
    """
    return tuple(sorted(names))


def check_order(
    declaration: str,
    names: Sequence[str],
    path: str | None = None,
    lineno: int | None = None,
) -> Diagnostic | None:
    """Compare names against their canonical order.

    Args:
        declaration: Enum name used in the diagnostic.
        names: Effective names in declared order.
        path: Optional file identity.
        lineno: Optional line of the declaration.

    Returns:
        None when the names are already sorted, otherwise a Diagnostic.
    """
    actual = tuple(names)
    if len(actual) < 2:
        return None

    expected = canonical_order(actual)
    if actual == expected:
        return None

    return Diagnostic(
        declaration=declaration,
        actual=actual,
        expected=expected,
        path=path,
        lineno=lineno,
    )
