"""
Command and Receipt models — the execution contract.

Commands describe external processes as argument lists. Receipts
represent results. This is the I/O contract between the catalog and
the command runner: routines hand over Commands, the runner returns
Receipts. Never exceptions.
"""

from __future__ import annotations

import shlex
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Command(BaseModel):
    """An external process invocation.

    ``argv`` is passed to the process as-is, never through a shell,
    so paths with spaces or quotes need no escaping.
    """

    argv: list[str]
    label: str = ""                 # optional human-readable name

    @property
    def program(self) -> str:
        """The executable name (first argv element)."""
        return self.argv[0] if self.argv else ""

    @property
    def display(self) -> str:
        """Shell-quoted rendering, for logs only."""
        return shlex.join(self.argv)


class Receipt(BaseModel):
    """Result of one command or file operation.

    Runners never raise. Failures land here together with the exit
    status of the process.
    """

    command: str = ""
    status: Literal["ok", "skipped", "failed"] = "ok"
    return_code: int | None = None

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    @classmethod
    def success(
        cls,
        command: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Receipt for a command that exited 0."""
        return cls(command=command, status="ok", output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        command: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        return cls(command=command, status="failed", error=error, **kwargs)

    @classmethod
    def skip(
        cls,
        command: str,
        reason: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Receipt for work deliberately not done; ``reason`` lands in ``output``."""
        return cls(command=command, status="skipped", output=reason, **kwargs)
