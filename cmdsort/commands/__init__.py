"""cmdsort CLI commands."""

from cmdsort.commands.check import check
from cmdsort.commands.init import init
from cmdsort.commands.names import names

__all__ = [
    "check",
    "init",
    "names",
]
