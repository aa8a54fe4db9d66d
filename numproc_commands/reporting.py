"""
Outcome Reporting
=================

Where the command system sends its messages. The dispatcher and the
local request manager never print or touch the root logger; they
are handed a Reporter at construction.

    LoggingReporter     Forwards to a stdlib logger (the default).
    RecordingReporter   Keeps messages in memory (tests, web UIs).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional


class Reporter(ABC):
    """Sink for informational and error messages."""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...


class LoggingReporter(Reporter):
    """Reporter backed by a ``logging.Logger``."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("numproc_commands")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


class RecordingReporter(Reporter):
    """Reporter that stores (level, message) pairs in order."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    @property
    def infos(self) -> list[str]:
        return [message for level, message in self.records if level == "info"]

    @property
    def errors(self) -> list[str]:
        return [message for level, message in self.records if level == "error"]
