"""
Runner base — the protocol contract between the catalog and the OS.

Optimization routines never spawn processes or touch system files
directly; they go through a Runner. That keeps the single place where
side effects happen swappable (real shell, dry run, test double).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from linopt.core.models.action import Command, Receipt


class Runner(ABC):
    """Abstract base class for command runners.

    Runners perform external side effects and return receipts.
    They never raise: failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def run(self, command: Command) -> Receipt:
        """Execute a command, sending its stdout and stderr to the run log.

        MUST never raise. A non-zero exit is a failed Receipt.
        """

    @abstractmethod
    def capture(self, command: Command) -> Receipt:
        """Execute a read-only probe and return its stdout in ``output``.

        Used for hardware detection (lspci, lsblk). Output is not logged.
        """

    @abstractmethod
    def append_line(self, path: Path, line: str) -> Receipt:
        """Append ``line`` to a system file, creating it if needed."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
