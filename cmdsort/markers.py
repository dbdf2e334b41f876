"""Runtime markers for subcommand enums.

These are what user code imports. The checker recognizes them by name in
the source and never imports the code it checks::

    from enum import Enum

    from cmdsort import command, subcommands


    @subcommands
    class Commands(Enum):
        ADD = command(help="Add an item")
        LIST = command(name="ls", help="List items")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, overload

from cmdsort.naming import to_kebab_case

E = TypeVar("E", bound=type[Enum])

_MARKER_ATTR = "__cmdsort_subcommands__"


@overload
def subcommands(cls: E) -> E: ...


@overload
def subcommands(cls: None = None) -> Callable[[E], E]: ...


def subcommands(cls: E | None = None) -> E | Callable[[E], E]:
    """Mark an enum as the source of a CLI's subcommands.

    Usable bare (``@subcommands``) or called (``@subcommands()``).
    """
    if cls is None:
        return subcommands

    setattr(cls, _MARKER_ATTR, True)
    return cls


def is_subcommand_enum(cls: type) -> bool:
    """Check whether a class was marked with :func:`subcommands`."""
    return bool(getattr(cls, _MARKER_ATTR, False))


# eq=False keeps every command() value distinct so members never alias
@dataclass(frozen=True, eq=False)
class CommandSpec:
    """Value of a subcommand enum member."""

    name: str | None = None
    help: str | None = None


def command(name: str | None = None, help: str | None = None) -> CommandSpec:
    """Declare a subcommand member value, optionally with an explicit name."""
    return CommandSpec(name=name, help=help)


def command_name(member: Enum) -> str:
    """Return the command name of a runtime enum member.

    Mirrors the static resolution: an explicit ``command(name=...)`` wins,
    otherwise the member name is converted to kebab-case.
    """
    value = member.value
    if isinstance(value, CommandSpec) and value.name is not None:
        return value.name
    return to_kebab_case(member.name)
