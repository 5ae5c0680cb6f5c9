"""
Run context — everything an optimization routine may look at.

Built once by the optimize use case after probing and handed to every
catalog action. Nothing here is module-level state: tests construct a
context with a MockRunner and a fake ``which``.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from linopt.adapters.base import Runner
from linopt.core.config.loader import OptimizerPaths, OptimizerSettings
from linopt.core.models.action import Command, Receipt
from linopt.core.models.profile import DistroProfile, DryRunFindings
from linopt.core.persistence.run_log import RunLog

Which = Callable[[str], "str | None"]


@dataclass
class RunContext:
    """Inputs shared by all catalog actions for one run."""

    settings: OptimizerSettings
    paths: OptimizerPaths
    profile: DistroProfile
    findings: DryRunFindings
    runner: Runner
    log: RunLog
    home: Path = field(default_factory=Path.home)
    which: Which = shutil.which

    def has_tool(self, name: str) -> bool:
        """Whether ``name`` resolves on PATH."""
        return self.which(name) is not None

    def run(self, *argv: str, label: str = "") -> Receipt:
        """Build a Command from ``argv`` and run it through the runner."""
        return self.runner.run(Command(argv=list(argv), label=label))
