"""Two marked enums, one unsorted, plus unmarked lookalikes."""

from enum import Enum, StrEnum, auto

from cmdsort import subcommands


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


@subcommands
class RepoCommands(StrEnum):
    CLONE = auto()
    FETCH = auto()
    PUSH = auto()


@subcommands
class RemoteCommands(Enum):
    REMOVE = auto()
    ADD = auto()
    SET_URL = auto()


@subcommands
class NotAnEnum:
    ZED = 1
    ALPHA = 2
