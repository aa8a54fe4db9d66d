"""
Command and Number Type Enumerations
====================================

The two closed vocabularies the interpreter understands, and the
single name-resolution routine shared by both.

    Command      PING, ECHO, GENERATE, PROCESS, HELP
    NumberType   INTEGER, DECIMAL

Declaration order of Command matters: the help generator walks the
members in this order when it builds the full help listing.

Name Resolution
---------------
Users type command words and number types in any case ("PING",
"Generate", "decimal"). resolve() maps such a surface form to the
enum member with the same name, or raises NameNotFound. It is the
only place that turns text into a symbol, so the dispatcher uses it
both for the leading command word and for nested identifiers (the
GENERATE type argument and the HELP topic).
"""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar


class Command(Enum):
    """Every command the interpreter recognizes."""
    PING = "ping"
    ECHO = "echo"
    GENERATE = "generate"
    PROCESS = "process"
    HELP = "help"


class NumberType(Enum):
    """Kind of numbers a GENERATE request asks for."""
    INTEGER = "integer"
    DECIMAL = "decimal"


class NameNotFound(ValueError):
    """Raised when a name does not match any member of an enumeration."""

    def __init__(self, enum_type: type, name: str):
        self.enum_type = enum_type
        self.name = name
        allowed = ", ".join(member.name.lower() for member in enum_type)
        super().__init__(
            f"Unknown {enum_type.__name__} '{name}'. Expected one of: {allowed}"
        )


E = TypeVar("E", bound=Enum)


def resolve(enum_type: Type[E], name: str) -> E:
    """Look up an enum member by name, ignoring case.

    Parameters
    ----------
    enum_type : type of Enum
        The enumeration to search (Command, NumberType, ...).
    name : str
        Surface form typed by the user. Must match a member name
        exactly apart from letter case; no prefixes, no trimming.

    Returns
    -------
    Enum member
        The member whose name equals ``name`` case-insensitively.

    Raises
    ------
    NameNotFound
        If no member matches.
    """
    wanted = name.casefold()
    for member in enum_type:
        if member.name.casefold() == wanted:
            return member
    raise NameNotFound(enum_type, name)
