"""Incorrectly sorted subcommands; fails validation."""

from enum import Enum, auto

from cmdsort import subcommands


@subcommands
class Commands(Enum):
    # List all items
    List = auto()

    # Add a new item
    Add = auto()

    # Update an existing item
    Update = auto()

    # Delete an item
    Delete = auto()
