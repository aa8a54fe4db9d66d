"""
Help Generator
==============

Human-readable descriptions of the commands, keyed off the same
Command enumeration and grammar the dispatcher uses. Each entry is a
banner, a one-sentence purpose, and the usage form from the grammar.

    describe(Command.PING)  →  one entry
    describe_all()          →  every entry, in Command declaration order
"""

from __future__ import annotations

from typing import Optional

from numproc_commands.enums import Command
from numproc_commands.grammar import GRAMMAR, CommandRule

_PURPOSES = {
    Command.PING: "Sends a blank message to the server to verify the connection.",
    Command.ECHO: "Sends the selected text to the server and returns it.",
    Command.GENERATE: (
        "Sends a request to the server to generate numbers (integers or decimals) "
        "and saves the generated numbers to a file."
    ),
    Command.PROCESS: (
        "Sends the numbers stored in the input file to the server for sorting "
        "and saves the sorted numbers to the output file."
    ),
    Command.HELP: "Print out helpful message on how to use the program.",
}


def describe(command: Command,
             grammar: Optional[dict[Command, CommandRule]] = None) -> str:
    """Return the help entry for a single command ("" if unknown).

    The usage line is taken from ``grammar`` (the built-in GRAMMAR
    when not given), so a parser with its own rules documents them.
    """
    purpose = _PURPOSES.get(command)
    if purpose is None:
        return ""
    rules = grammar if grammar is not None else GRAMMAR
    return (
        f"\n----------> {command.name} <----------\n"
        f"{purpose}\n"
        f"Usage: {rules[command].usage}\n"
    )


def describe_all(grammar: Optional[dict[Command, CommandRule]] = None) -> str:
    """Return the help entries for all commands, in declaration order."""
    return "".join(describe(command, grammar) for command in Command)
