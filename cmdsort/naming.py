"""Effective command name resolution.

A member's effective name is what a user types on the command line: the
explicit override when one is declared, otherwise the member identifier
converted to kebab-case.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdsort.extractor import Member

# Runs of characters that are not letters or digits
_SEPARATORS = re.compile(r"[\W_]+")


def split_words(identifier: str) -> list[str]:
    """Split an identifier into words.

    Non-alphanumeric characters separate words and are dropped. Inside a
    chunk, a lowercase-to-uppercase transition starts a new word, and the
    last capital of an uppercase run starts a new word when a lowercase
    letter follows it (``HTTPServer`` -> ``HTTP``, ``Server``). Digits and
    other uncased characters take the case of the character before them.

    Args:
        identifier: Source identifier as written.

    Returns:
        Words in order, case preserved.
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(identifier):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    # None marks a word boundary, otherwise "lower" or "upper"
    mode: str | None = None

    for i, char in enumerate(chunk):
        if i + 1 == len(chunk):
            words.append(chunk[start:])
            break

        nxt = chunk[i + 1]
        if char.islower():
            next_mode: str | None = "lower"
        elif char.isupper():
            next_mode = "upper"
        else:
            next_mode = mode

        if next_mode == "lower" and nxt.isupper():
            words.append(chunk[start : i + 1])
            start = i + 1
            mode = None
        elif mode == "upper" and char.isupper() and nxt.islower():
            words.append(chunk[start:i])
            start = i
            mode = None
        else:
            mode = next_mode

    return words


def to_kebab_case(identifier: str) -> str:
    """Convert an identifier to its default command name.

    >>> to_kebab_case("ListAllItems")
    'list-all-items'
    >>> to_kebab_case("ADD_USER")
    'add-user'
    """
    return "-".join(word.lower() for word in split_words(identifier))


def resolve_name(member: Member) -> str:
    """Return the effective command name of a member.

    An explicit override is used verbatim, without any case change.
    """
    if member.override is not None:
        return member.override
    return to_kebab_case(member.identifier)
