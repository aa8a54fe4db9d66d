"""
Command Grammar
===============

The lexical shape of every valid input line.

Matching happens in two phases, and this module supplies the rules
for both:

    "generate "out.txt" 10 integer -5 5"
                  ↓
    COMMAND_WORD pulls the leading letters → "generate"
                  ↓
    resolve() maps the word to Command.GENERATE
                  ↓
    GRAMMAR[Command.GENERATE] validates the WHOLE line and
    captures path, count, number_type, minimum, maximum

The first phase is deliberately loose. It only answers "which rule
applies?", so a line like "generate oops" is reported as a malformed
GENERATE rather than as an unknown command, and the error message can
point the user at 'help generate'.

Patterns
--------
    ping
    echo <free text>
    generate "<path>" <count> <type> <min> <max>
    process "<input path>" "<output path>"
    help
    help <command>

Command words and identifiers are case-insensitive. Quoted paths and
echo text are captured exactly as typed. All patterns are compiled
with re.ASCII so that "letters" means A-Z and a-z only.

Capture groups are named; the group name decides how the dispatcher
converts the captured text (see dispatcher.CONVERTERS).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from numproc_commands.enums import Command

_FLAGS = re.IGNORECASE | re.ASCII

# Phase one: leading command word. Anything after it is ignored here.
COMMAND_WORD = re.compile(r'^([a-z]+)', _FLAGS)


@dataclass(frozen=True)
class CommandRule:
    """Full-line rule for one Command.

    Attributes
    ----------
    command : Command
        The command this rule validates.
    patterns : tuple of compiled patterns
        Accepted forms, tried in order. HELP has two (bare and with
        a topic); every other command has one.
    usage : str
        Canonical form shown in help text.
    error : str
        Message raised when a line starts with the command word but
        matches none of the patterns.
    """
    command: Command
    patterns: tuple[re.Pattern, ...]
    usage: str
    error: str

    def match(self, line: str) -> Optional[re.Match]:
        """Return the first pattern match for the whole line, or None."""
        for pattern in self.patterns:
            found = pattern.match(line)
            if found is not None:
                return found
        return None


def _rule(command: Command, *patterns: str, usage: str, error: str) -> CommandRule:
    return CommandRule(
        command=command,
        patterns=tuple(re.compile(p, _FLAGS) for p in patterns),
        usage=usage,
        error=error,
    )


GRAMMAR: dict[Command, CommandRule] = {
    Command.PING: _rule(
        Command.PING,
        r'^ping\s*$',
        usage='ping',
        error="No additional characters are allowed in PING command",
    ),
    Command.ECHO: _rule(
        Command.ECHO,
        r'^echo\s+(?P<text>.*)$',
        usage='echo <text>',
        error="No text to send to server",
    ),
    Command.GENERATE: _rule(
        Command.GENERATE,
        r'^generate\s+"(?P<path>[^"]+)"\s+(?P<count>\d+)\s+(?P<number_type>[a-z]+)'
        r'\s+(?P<minimum>-?\d+)\s+(?P<maximum>-?\d+)\s*$',
        usage='generate "<path>" <count> <integer|decimal> <min> <max>',
        error="Incorrect GENERATE command format. "
              "Use 'help generate' to get instructions.",
    ),
    Command.PROCESS: _rule(
        Command.PROCESS,
        r'^process\s+"(?P<input_path>[^"]+)"\s+"(?P<output_path>[^"]+)"\s*$',
        usage='process "<input path>" "<output path>"',
        error="Incorrect PROCESS command format. "
              "Use 'help process' to get instructions.",
    ),
    Command.HELP: _rule(
        Command.HELP,
        r'^help\s*$',
        r'^help\s+(?P<topic>[a-z]+)\s*$',
        usage='help [command]',
        error="Incorrect HELP command format",
    ),
}
