"""Locate subcommand enums in Python source.

A class is a candidate when it is enumeration-shaped (it derives from an
``Enum``-like base) and carries the ``@subcommands`` marker decorator. Every
other class is ignored, however much it resembles one.
"""

from __future__ import annotations

import ast
from collections.abc import Iterator
from dataclasses import dataclass

from cmdsort.constants import (
    ENUM_BASE_NAMES,
    ENUM_BASE_SUFFIX,
    MARKER_NAMES,
    MEMBER_WRAPPER_NAMES,
    NONMEMBER_WRAPPER_NAMES,
    OVERRIDE_CALL_NAMES,
    OVERRIDE_NAME_KEY,
)
from cmdsort.exceptions import ParseError
from cmdsort.logging import get_logger

logger = get_logger("extractor")


@dataclass(frozen=True)
class SourceUnit:
    """One parsed input file."""

    tree: ast.Module
    path: str | None = None


@dataclass(frozen=True)
class Member:
    """One enum member as declared in source."""

    identifier: str
    override: str | None = None
    position: int = 0
    lineno: int | None = None


@dataclass(frozen=True)
class CandidateDeclaration:
    """A marked enum and its members in source order."""

    name: str
    qualname: str
    lineno: int
    members: tuple[Member, ...] = ()


def parse_source(text: str, path: str | None = None) -> SourceUnit:
    """Parse Python source text.

    Args:
        text: Source code.
        path: File identity used in error messages.

    Returns:
        SourceUnit wrapping the module tree.

    Raises:
        ParseError: If the text is not valid Python.
    """
    filename = path or "<source>"
    try:
        tree = ast.parse(text, filename=filename)
    except SyntaxError as e:
        raise ParseError(path, e.msg or "invalid syntax", e.lineno, e.offset) from e
    except ValueError as e:
        # Raised instead of SyntaxError for null bytes on older interpreters
        raise ParseError(path, str(e)) from e
    except RecursionError as e:
        raise ParseError(path, "source too deeply nested to parse") from e
    return SourceUnit(tree=tree, path=path)


def terminal_name(node: ast.expr) -> str | None:
    """Return the last component of a name, dotted name, or call to one.

    ``subcommands``, ``cmdsort.subcommands`` and ``subcommands()`` all
    yield ``"subcommands"``.
    """
    if isinstance(node, ast.Call):
        node = node.func
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


def is_enum_shaped(node: ast.ClassDef) -> bool:
    """Check whether a class derives from an Enum-like base."""
    for base in node.bases:
        name = terminal_name(base)
        if name is None:
            continue
        if name in ENUM_BASE_NAMES or name.endswith(ENUM_BASE_SUFFIX):
            return True
    return False


def has_marker(node: ast.ClassDef) -> bool:
    """Check whether a class carries the subcommand marker decorator."""
    return any(terminal_name(dec) in MARKER_NAMES for dec in node.decorator_list)


def find_override(value: ast.expr | None) -> str | None:
    """Return the explicit command name attached to a member value.

    Only a string literal passed as ``name=`` to a recognized override call
    counts. Anything else means the default name applies.
    """
    if not isinstance(value, ast.Call):
        return None
    if terminal_name(value) not in OVERRIDE_CALL_NAMES:
        return None
    for keyword in value.keywords:
        if keyword.arg != OVERRIDE_NAME_KEY:
            continue
        if isinstance(keyword.value, ast.Constant) and isinstance(keyword.value.value, str):
            return keyword.value.value
        return None
    return None


def _unwrap_member(value: ast.expr | None) -> ast.expr | None:
    if (
        isinstance(value, ast.Call)
        and terminal_name(value) in MEMBER_WRAPPER_NAMES
        and len(value.args) == 1
    ):
        return value.args[0]
    return value


def _is_nonmember(value: ast.expr | None) -> bool:
    return isinstance(value, ast.Call) and terminal_name(value) in NONMEMBER_WRAPPER_NAMES


_NOT_LITERAL = object()


def _literal_value(value: ast.expr | None) -> object:
    """Return the value of a constant or signed number, else ``_NOT_LITERAL``."""
    if isinstance(value, ast.Constant):
        return value.value
    if (
        isinstance(value, ast.UnaryOp)
        and isinstance(value.op, (ast.USub, ast.UAdd))
        and isinstance(value.operand, ast.Constant)
        and isinstance(value.operand.value, (int, float, complex))
        and not isinstance(value.operand.value, bool)
    ):
        operand = value.operand.value
        return -operand if isinstance(value.op, ast.USub) else operand
    return _NOT_LITERAL


def extract_members(node: ast.ClassDef) -> tuple[Member, ...]:
    """Extract enum members from a class body in source order.

    Aliases are not members: in ``A = B = v`` only ``A`` is, and a member
    whose literal value equals an earlier member's literal value is skipped.

    Args:
        node: Class definition to inspect.

    Returns:
        Members with their overrides and positions.
    """
    members: list[Member] = []
    seen_literals: list[object] = []

    for stmt in node.body:
        if isinstance(stmt, ast.Assign):
            if not all(isinstance(target, ast.Name) for target in stmt.targets):
                continue
            target = stmt.targets[0]
            value: ast.expr | None = stmt.value
        elif isinstance(stmt, ast.AnnAssign):
            if stmt.value is None:
                continue
            target = stmt.target
            value = stmt.value
        else:
            continue

        # Private and sunder/dunder names never become members
        if not isinstance(target, ast.Name) or target.id.startswith("_"):
            continue
        if _is_nonmember(value):
            continue

        value = _unwrap_member(value)
        literal = _literal_value(value)
        if literal is not _NOT_LITERAL:
            if literal in seen_literals:
                continue
            seen_literals.append(literal)

        members.append(
            Member(
                identifier=target.id,
                override=find_override(value),
                position=len(members),
                lineno=stmt.lineno,
            )
        )

    return tuple(members)


def _child_statements(stmt: ast.stmt) -> list[ast.stmt]:
    """Return the statements nested directly inside a compound statement."""
    children: list[ast.stmt] = list(getattr(stmt, "body", None) or [])
    for handler in getattr(stmt, "handlers", None) or []:
        children.extend(handler.body)
    for case in getattr(stmt, "cases", None) or []:
        children.extend(case.body)
    for field in ("orelse", "finalbody"):
        block = getattr(stmt, field, None)
        if isinstance(block, list):
            children.extend(block)
    return children


def iter_classes(tree: ast.Module) -> Iterator[tuple[ast.ClassDef, str]]:
    """Yield every class definition with its qualified name, in source order.

    Only statement blocks are walked, never expressions, and the walk uses an
    explicit stack, so deeply nested expressions cannot exhaust the
    interpreter's recursion limit.
    """
    # Next statement to visit is last
    pending: list[tuple[ast.stmt, tuple[str, ...]]] = [(stmt, ()) for stmt in reversed(tree.body)]

    while pending:
        stmt, scope = pending.pop()
        inner = scope
        if isinstance(stmt, ast.ClassDef):
            inner = (*scope, stmt.name)
            yield stmt, ".".join(inner)
        elif isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
            inner = (*scope, stmt.name, "<locals>")

        pending.extend((child, inner) for child in reversed(_child_statements(stmt)))


def extract_declarations(unit: SourceUnit) -> list[CandidateDeclaration]:
    """Find all subcommand enums in a parsed file.

    Args:
        unit: Parsed source.

    Returns:
        Candidate declarations in source order.
    """
    declarations = [
        CandidateDeclaration(
            name=node.name,
            qualname=qualname,
            lineno=node.lineno,
            members=extract_members(node),
        )
        for node, qualname in iter_classes(unit.tree)
        if is_enum_shaped(node) and has_marker(node)
    ]
    logger.debug(
        "Found %d subcommand enum(s)",
        len(declarations),
        extra={"path": unit.path or "<source>", "count": len(declarations)},
    )
    return declarations
