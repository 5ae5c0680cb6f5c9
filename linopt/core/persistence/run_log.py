"""
Run log — the operator-facing record of one optimizer run.

One plain-text file per process lifetime, truncated when the run
starts and appended to afterwards. Section headers are mirrored to the
console; everything else (including child process output) only lands
in the file unless the caller explicitly echoes it.

This is separate from diagnostic ``logging`` output, which is
configured by ``linopt.core.observability.logging_config``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import IO

import click

logger = logging.getLogger(__name__)

START_BANNER = "Starting Linux Optimizer..."


class RunLog:
    """Append-only text log with console-mirrored section headers.

    Usage::

        with RunLog(paths.log_file) as log:
            log.section("CPU & System Performance")
            log.write("vm.swappiness = 10")
    """

    def __init__(
        self,
        path: Path,
        console: Callable[[str], None] | None = None,
    ):
        self._path = path
        self._console = console or click.echo
        self._handle: IO[str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def stream(self) -> IO[str]:
        """Open file handle, for redirecting child process output.

        Flushed before being handed out so Python-side writes stay in
        order with whatever the child process writes.
        """
        handle = self._open()
        handle.flush()
        return handle

    def start(self) -> None:
        """Truncate the file and write the timestamped start banner."""
        self.close()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = open(self._path, "w", encoding="utf-8")
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.write(f"{START_BANNER} ({stamp})")
        logger.debug("Run log started at %s", self._path)

    def write(self, message: str) -> None:
        """Append a line to the file only."""
        handle = self._open()
        handle.write(message + "\n")
        handle.flush()

    def echo(self, message: str) -> None:
        """Append a line to the file and print it to the console."""
        self.write(message)
        self._console(message)

    def section(self, title: str) -> None:
        """Blank-line-prefixed bracketed header, file and console."""
        self.echo(f"\n[ {title} ]")

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _open(self) -> IO[str]:
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(self._path, "a", encoding="utf-8")
        return self._handle

    def __enter__(self) -> RunLog:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
