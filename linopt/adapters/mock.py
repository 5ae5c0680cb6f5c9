"""
Mock runner — universal test double for command execution.

Records every command instead of running it. Probe output and failures
are configurable per program name, so tests can simulate "NVIDIA card
present" or "only spinning disks" without touching the host.
"""

from __future__ import annotations

from pathlib import Path

from linopt.adapters.base import Runner
from linopt.core.models.action import Command, Receipt


class MockRunner(Runner):
    """Universal mock runner for testing.

    By default every command succeeds and every probe returns empty
    output.
    """

    def __init__(self, runner_name: str = "mock"):
        self._name = runner_name
        self._probe_output: dict[str, str] = {}
        self._failures: dict[str, str] = {}
        self._calls: list[Command] = []
        self._probes: list[Command] = []
        self._appends: list[tuple[Path, str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def calls(self) -> list[Command]:
        """Commands passed to ``run``, in order."""
        return self._calls

    @property
    def probes(self) -> list[Command]:
        """Commands passed to ``capture``, in order."""
        return self._probes

    @property
    def appends(self) -> list[tuple[Path, str]]:
        return self._appends

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def argvs(self) -> list[list[str]]:
        """Shorthand: argv of every ``run`` call."""
        return [c.argv for c in self._calls]

    def programs(self) -> list[str]:
        return [c.program for c in self._calls]

    def set_probe_output(self, program: str, output: str) -> None:
        """Canned stdout for ``capture`` calls of ``program``."""
        self._probe_output[program] = output

    def set_failure(self, program: str, error: str = "Mock failure") -> None:
        """Make every ``run`` of ``program`` fail."""
        self._failures[program] = error

    def run(self, command: Command) -> Receipt:
        self._calls.append(command)
        if command.program in self._failures:
            return Receipt.failure(
                command=command.display,
                error=self._failures[command.program],
                return_code=1,
            )
        return Receipt.success(command=command.display, return_code=0)

    def capture(self, command: Command) -> Receipt:
        self._probes.append(command)
        if command.program in self._failures:
            return Receipt.failure(
                command=command.display,
                error=self._failures[command.program],
            )
        return Receipt.success(
            command=command.display,
            output=self._probe_output.get(command.program, ""),
        )

    def append_line(self, path: Path, line: str) -> Receipt:
        self._appends.append((path, line))
        return Receipt.success(command=f"append '{line}' >> {path}")

    def reset(self) -> None:
        """Clear recorded calls and configured responses."""
        self._calls.clear()
        self._probes.clear()
        self._appends.clear()
        self._probe_output.clear()
        self._failures.clear()
