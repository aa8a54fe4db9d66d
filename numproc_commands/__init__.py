"""
Numeric Processing Command System
=================================

A line-oriented command interpreter for the numeric-processing
client. One line of text goes in; it is validated against a small
fixed grammar, its arguments are converted to typed values, and the
matching request manager operation is called.

Architecture Overview
---------------------

    ┌─────────────────┐     ┌──────────────┐     ┌──────────────────────┐
    │  User Input      │────►│  Command     │────►│  RequestManager      │
    │  (terminal)      │     │  Parser      │     │  ping / echo /       │
    └─────────────────┘     └──────┬───────┘     │  generate / sort     │
                                   │              └──────────────────────┘
                              ┌────▼────┐
                              │ Reporter│──► help text, errors
                              └─────────┘

Commands
--------
    ping
    echo <free text>
    generate "<path>" <count> <integer|decimal> <min> <max>
    process "<input path>" "<output path>"
    help [command]

Module Structure
----------------
    numproc_commands/
    ├── __init__.py      ← This file. Public names.
    ├── enums.py         ← Command, NumberType, resolve(), NameNotFound.
    ├── grammar.py       ← Name-extraction rule and per-command rules.
    ├── dispatcher.py    ← CommandParser: parse, call, call_safe, help.
    ├── help.py          ← Help text for one or all commands.
    ├── manager.py       ← RequestManager contract, LocalRequestManager.
    └── reporting.py     ← Reporter, LoggingReporter, RecordingReporter.

Usage
-----
    from numproc_commands import CommandParser, LocalRequestManager

    parser = CommandParser(LocalRequestManager())
    parser.call_safe('generate "numbers.txt" 100 decimal 0 1')
    parser.call_safe('process "numbers.txt" "sorted.txt"')
"""

from numproc_commands.dispatcher import CommandParser, ParsedCommand
from numproc_commands.enums import Command, NameNotFound, NumberType, resolve
from numproc_commands.manager import LocalRequestManager, RequestManager
from numproc_commands.reporting import LoggingReporter, RecordingReporter, Reporter

__all__ = [
    'Command',
    'CommandParser',
    'LocalRequestManager',
    'LoggingReporter',
    'NameNotFound',
    'NumberType',
    'ParsedCommand',
    'RecordingReporter',
    'Reporter',
    'RequestManager',
    'resolve',
]
