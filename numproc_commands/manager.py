"""
Request Managers
================

The collaborator side of the command system. The dispatcher decides
WHAT the user asked for; a RequestManager carries it out.

    RequestManager        Abstract contract: ping, echo, generate, sort.
    LocalRequestManager   Performs all four operations in-process,
                          for offline runs and demos.

A manager that talks to the remote numeric-processing service only
has to subclass RequestManager; the dispatcher never sees the
difference. Any I/O failure a manager raises is passed through
CommandParser.call() untouched.

File Format
-----------
Number files are plain text, one number per line. Integers are
written without a decimal point; decimals with a fixed number of
places (see ``decimal_places``). The sorter accepts any whitespace
between numbers on input.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import numpy as np

from numproc_commands.enums import NumberType
from numproc_commands.reporting import LoggingReporter, Reporter

logger = logging.getLogger(__name__)


class RequestManager(ABC):
    """Operations the command system can request from the service."""

    @abstractmethod
    def ping(self) -> None:
        """Verify the connection."""
        ...

    @abstractmethod
    def echo(self, text: str):
        """Send text and get it back."""
        ...

    @abstractmethod
    def generate(self, path: str, count: int, number_type: NumberType,
                 minimum: int, maximum: int):
        """Generate ``count`` numbers in [minimum, maximum] into ``path``."""
        ...

    @abstractmethod
    def sort(self, input_path: str, output_path: str):
        """Sort the numbers stored in ``input_path`` into ``output_path``."""
        ...


class LocalRequestManager(RequestManager):
    """RequestManager that does the work itself with numpy.

    Parameters
    ----------
    reporter : Reporter, optional
        Where ping/echo/generate/sort outcomes are reported.
        Defaults to a LoggingReporter.
    base_dir : str or Path, optional
        Directory that relative paths are resolved against.
        Defaults to the current working directory.
    seed : int, optional
        Seed for the random generator, for reproducible output.
    decimal_places : int
        Digits after the point when writing DECIMAL numbers.
    """

    def __init__(self, reporter: Optional[Reporter] = None,
                 base_dir: Optional[Union[str, Path]] = None,
                 seed: Optional[int] = None,
                 decimal_places: int = 6):
        self.reporter = reporter or LoggingReporter()
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.decimal_places = decimal_places
        self._rng = np.random.default_rng(seed)

    def _resolve(self, path: str) -> Path:
        target = Path(path).expanduser()
        if self.base_dir is not None and not target.is_absolute():
            target = self.base_dir / target
        return target

    def ping(self) -> None:
        self.reporter.info("pong")

    def echo(self, text: str) -> str:
        self.reporter.info(f"Echo: {text}")
        return text

    def generate(self, path: str, count: int, number_type: NumberType,
                 minimum: int, maximum: int) -> Path:
        """Write ``count`` random numbers to ``path`` and return the path.

        INTEGER draws from [minimum, maximum] inclusive; DECIMAL draws
        uniformly from [minimum, maximum).

        Raises
        ------
        ValueError
            If minimum is greater than maximum.
        """
        if minimum > maximum:
            raise ValueError(
                f"Minimum must not exceed maximum, got {minimum} > {maximum}"
            )

        if number_type is NumberType.INTEGER:
            values = self._rng.integers(minimum, maximum, size=count, endpoint=True)
            fmt = "%d"
        else:
            values = self._rng.uniform(minimum, maximum, size=count)
            fmt = f"%.{self.decimal_places}f"

        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        np.savetxt(target, values, fmt=fmt)

        logger.debug(f"Generated {count} {number_type.value} numbers into {target}")
        self.reporter.info(
            f"Generated {count} {number_type.value} numbers in "
            f"[{minimum}, {maximum}] into {target}"
        )
        return target

    def sort(self, input_path: str, output_path: str) -> Path:
        """Sort the numbers in ``input_path`` ascending into ``output_path``.

        Files that hold only integers stay integers. Anything else is
        read as decimals.

        Raises
        ------
        FileNotFoundError
            If the input file does not exist.
        ValueError
            If the input contains something that is not a number.
        """
        source = self._resolve(input_path)
        tokens = source.read_text().split()

        try:
            values = np.asarray(tokens, dtype=np.int64)
            fmt = "%d"
        except (ValueError, OverflowError):
            values = np.asarray(tokens, dtype=np.float64)
            fmt = f"%.{self.decimal_places}f"

        ordered = np.sort(values)

        target = self._resolve(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        np.savetxt(target, ordered, fmt=fmt)

        logger.debug(f"Sorted {ordered.size} numbers from {source} into {target}")
        self.reporter.info(f"Sorted {ordered.size} numbers from {source} into {target}")
        return target
