"""
Command Dispatcher
==================

Turns one line of user text into exactly one request.

Role in the System
------------------
The dispatcher sits between the terminal prompt and the request
manager. It owns the routing decision and argument conversion; the
manager owns the actual work.

    User types: generate "out.txt" 10 integer -5 5
                  ↓
    COMMAND_WORD → "generate" → Command.GENERATE
                  ↓
    GRAMMAR[GENERATE] matches the whole line
                  ↓
    groups converted: count=10, number_type=INTEGER, minimum=-5, maximum=5
                  ↓
    manager.generate("out.txt", 10, NumberType.INTEGER, -5, 5)

Failure Paths
-------------
Every failure is a ValueError, told apart only by its message:

    "Unknown command pattern"       line does not start with letters
    NameNotFound                    leading word is not a command,
                                    or a nested identifier is unknown
    rule.error                      known command, malformed line

Validation finishes before the manager is touched, so a failing
call() has no side effects. call() lets every exception propagate;
call_safe() is the boundary that reports and swallows them.

Classes
-------
ParsedCommand
    The resolved Command and its converted arguments.

CommandParser
    parse(line), call(line), call_safe(line), help([command]).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from numproc_commands import help as help_text
from numproc_commands.enums import Command, NumberType, resolve
from numproc_commands.grammar import COMMAND_WORD, GRAMMAR, CommandRule
from numproc_commands.manager import RequestManager
from numproc_commands.reporting import LoggingReporter, Reporter

logger = logging.getLogger(__name__)


# Group name → conversion applied to the captured text.
# Groups not listed here are passed through as strings.
CONVERTERS: dict[str, Callable[[str], Any]] = {
    "count": int,
    "minimum": int,
    "maximum": int,
    "number_type": lambda name: resolve(NumberType, name),
    "topic": lambda name: resolve(Command, name),
}


@dataclass(frozen=True)
class ParsedCommand:
    """A validated line, ready to execute.

    Attributes
    ----------
    command : Command
        Which command the line resolved to.
    arguments : dict
        Typed values keyed by capture group name. Groups that did
        not take part in the match (e.g. HELP's topic on a bare
        'help') are left out.
    """
    command: Command
    arguments: dict[str, Any] = field(default_factory=dict)


class CommandParser:
    """Validates input lines and routes them to a RequestManager.

    The grammar is read-only, so one CommandParser may be shared
    freely; each call works only with its own local state.

    Usage
    -----
        parser = CommandParser(LocalRequestManager())
        parser.call('generate "out.txt" 10 integer -5 5')
        parser.call_safe('nonsense')   # reported, not raised
    """

    def __init__(self, manager: RequestManager,
                 reporter: Optional[Reporter] = None,
                 grammar: Optional[dict[Command, CommandRule]] = None):
        self.manager = manager
        self.reporter = reporter or LoggingReporter()
        self.grammar = grammar if grammar is not None else GRAMMAR

    def parse(self, line: str) -> ParsedCommand:
        """Validate a line and convert its arguments.

        Raises
        ------
        ValueError
            If the line is not a well-formed command (see module
            docstring for the individual messages).
        """
        word = COMMAND_WORD.match(line)
        if word is None:
            raise ValueError("Unknown command pattern")

        command = resolve(Command, word.group(1))
        rule = self.grammar[command]

        match = rule.match(line)
        if match is None:
            raise ValueError(rule.error)

        arguments = {}
        for name, value in match.groupdict().items():
            if value is None:
                continue
            convert = CONVERTERS.get(name)
            arguments[name] = convert(value) if convert else value

        return ParsedCommand(command=command, arguments=arguments)

    def call(self, line: str) -> Optional[str]:
        """Parse a line and execute it.

        Returns
        -------
        str or None
            The help text for HELP, otherwise None.
        """
        parsed = self.parse(line)
        args = parsed.arguments
        command = parsed.command
        logger.debug(f"Dispatching {command.name} with {args}")

        if command is Command.PING:
            self.manager.ping()
        elif command is Command.ECHO:
            self.manager.echo(args["text"])
        elif command is Command.GENERATE:
            self.manager.generate(
                args["path"],
                args["count"],
                args["number_type"],
                args["minimum"],
                args["maximum"],
            )
        elif command is Command.PROCESS:
            self.manager.sort(args["input_path"], args["output_path"])
        elif command is Command.HELP:
            text = "Executing help command." + self.help(args.get("topic"))
            self.reporter.info(text)
            return text
        return None

    def call_safe(self, line: str) -> bool:
        """Execute a line, reporting any failure instead of raising.

        Returns True if the call completed, False if it failed.
        """
        try:
            self.call(line)
        except Exception as e:
            self.reporter.error(str(e) or type(e).__name__)
            return False
        return True

    def help(self, command: Optional[Command] = None) -> str:
        """Help for one command, or for all commands if none given."""
        if command is None:
            return help_text.describe_all(self.grammar)
        return help_text.describe(command, self.grammar)
