"""
Shell command runner — execute external tools for the optimizer.

This is the SINGLE PLACE where ``subprocess.run`` is called. Commands
are argv lists and never go through a shell. Output of optimization
commands is redirected into the run log; exit status is captured in a
Receipt instead of being discarded.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from linopt.adapters.base import Runner
from linopt.core.models.action import Command, Receipt
from linopt.core.persistence.run_log import RunLog

logger = logging.getLogger(__name__)

# Probes are quick read-only listings; a hung lspci must not stall startup.
PROBE_TIMEOUT = 15


class ShellCommandRunner(Runner):
    """Run commands for real, logging their output to the run log.

    Args:
        log: Run log receiving command output. May be None for
            read-only use (``capture`` only), e.g. the detect command.
        dry_run: If True, ``run`` and ``append_line`` only write
            "[dry-run] would ..." lines; probes still execute.
    """

    def __init__(self, log: RunLog | None = None, dry_run: bool = False):
        self._log = log
        self._dry_run = dry_run

    @property
    def name(self) -> str:
        return "shell"

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def run(self, command: Command) -> Receipt:
        display = command.display

        if self._dry_run:
            self._note(f"[dry-run] would run: {display}")
            return Receipt.skip(command=display, reason="dry-run")

        if self._log is None:
            return Receipt.failure(command=display, error="No run log attached")

        logger.debug("Executing: %s", display)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command.argv,
                stdin=subprocess.DEVNULL,
                stdout=self._log.stream,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except FileNotFoundError:
            self._note(f"{command.program}: command not found")
            return Receipt.failure(
                command=display,
                error=f"{command.program}: command not found",
            )
        except OSError as e:
            self._note(f"{command.program}: {e}")
            return Receipt.failure(command=display, error=f"Command execution error: {e}")

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                command=display,
                return_code=0,
                duration_ms=elapsed_ms,
            )

        logger.info("%s exited with %d", display, result.returncode)
        return Receipt.failure(
            command=display,
            error=f"Command exited with code {result.returncode}",
            return_code=result.returncode,
            duration_ms=elapsed_ms,
        )

    def capture(self, command: Command) -> Receipt:
        display = command.display
        logger.debug("Probing: %s", display)

        try:
            result = subprocess.run(
                command.argv,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=PROBE_TIMEOUT,
                check=False,
            )
        except FileNotFoundError:
            return Receipt.failure(
                command=display,
                error=f"{command.program}: command not found",
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                command=display,
                error=f"Probe timed out after {PROBE_TIMEOUT}s",
            )
        except OSError as e:
            return Receipt.failure(command=display, error=f"Probe error: {e}")

        if result.returncode == 0:
            return Receipt.success(
                command=display,
                output=result.stdout,
                return_code=0,
            )
        return Receipt.failure(
            command=display,
            error=result.stderr.strip() or f"Probe exited with code {result.returncode}",
            output=result.stdout,
            return_code=result.returncode,
        )

    def append_line(self, path: Path, line: str) -> Receipt:
        label = f"append '{line}' >> {path}"

        if self._dry_run:
            self._note(f"[dry-run] would {label}")
            return Receipt.skip(command=label, reason="dry-run")

        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            self._note(f"Cannot write {path}: {e}")
            return Receipt.failure(command=label, error=str(e))

        return Receipt.success(command=label)

    def _note(self, message: str) -> None:
        if self._log is not None:
            self._log.write(message)
        else:
            logger.info(message)
