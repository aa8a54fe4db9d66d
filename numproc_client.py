#!/usr/bin/env python3
"""
Numeric Processing Client - terminal front end

Reads command lines from the keyboard (or from -e arguments) and
hands each one to the command parser. A bad line is reported and
the prompt comes back; only quit, exit or end of input stop the loop.

    ping
    echo hello there
    generate "numbers.txt" 100 integer -50 50
    process "numbers.txt" "sorted.txt"
    help
    help generate
    quit
"""

import sys
import logging
from typing import Iterable, Optional

from config_manager import ClientConfig, setup_configuration
from numproc_commands import CommandParser, LocalRequestManager, LoggingReporter

QUIT_WORDS = ('quit', 'exit')

logger = logging.getLogger(__name__)


class ConsoleMode:
	"""Centralized console output configuration"""
	VERBOSE = False
	QUIET = False

	@classmethod
	def set_mode(cls, verbose=False, quiet=False):
		cls.VERBOSE = verbose
		cls.QUIET = quiet

		if verbose:
			logging.basicConfig(level=logging.DEBUG, format='🐛 %(message)s')
		elif quiet:
			logging.basicConfig(level=logging.WARNING, format='⚠️  %(message)s')
		else:
			logging.basicConfig(level=logging.INFO, format='ℹ️  %(message)s')

	@classmethod
	def user_print(cls, message):
		"""Print user-facing messages (always shown unless quiet)"""
		if not cls.QUIET:
			print(message)


def build_parser(config: ClientConfig) -> CommandParser:
	"""Wire a CommandParser to a LocalRequestManager using the configuration"""
	reporter = LoggingReporter()
	manager = LocalRequestManager(
		reporter=reporter,
		base_dir=config.workspace.base_dir,
		seed=config.generation.seed,
		decimal_places=config.generation.decimal_places,
	)
	return CommandParser(manager, reporter=reporter)


def run_lines(parser: CommandParser, lines: Iterable[str]) -> int:
	"""Execute each line in order; return how many failed"""
	failures = 0
	for line in lines:
		if not parser.call_safe(line):
			failures += 1
	return failures


def interactive_loop(parser: CommandParser, config: ClientConfig, input_func=input) -> None:
	"""Prompt for lines until quit/exit or end of input"""
	if config.interface.show_banner:
		ConsoleMode.user_print("=" * 60)
		ConsoleMode.user_print("  Numeric Processing Client")
		ConsoleMode.user_print("  Type 'help' for commands, 'quit' to exit")
		ConsoleMode.user_print("=" * 60)

	while True:
		try:
			line = input_func(config.interface.prompt)
		except (EOFError, KeyboardInterrupt):
			ConsoleMode.user_print("")
			break

		if not line.strip():
			continue

		if line.strip().lower() in QUIT_WORDS:
			break

		parser.call_safe(line)

	logger.debug("Interactive loop finished")


def main(argv: Optional[list] = None) -> int:
	config, exit_code, _manager, args = setup_configuration(argv)
	if exit_code is not None:
		return exit_code

	ConsoleMode.set_mode(verbose=config.console.verbose, quiet=config.console.quiet)
	parser = build_parser(config)

	if args.execute:
		failures = run_lines(parser, args.execute)
		return 1 if failures else 0

	interactive_loop(parser, config)
	return 0


if __name__ == "__main__":
	sys.exit(main())
