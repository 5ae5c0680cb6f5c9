"""
Detect use case — read-only view of what the optimizer would see.

Runs the same probes as an optimizer run, without creating the run
log, prompting, or changing anything.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from linopt.adapters.base import Runner
from linopt.adapters.shell.command import ShellCommandRunner
from linopt.core.models.profile import DistroProfile, DryRunFindings
from linopt.core.services.probe.distro import read_distro_id, resolve_profile
from linopt.core.services.probe.hardware import (
    collect_findings,
    detect_nvidia_gpu,
    has_non_rotational_disk,
)


@dataclass
class DetectResult:
    """Probe results for the current host."""

    profile: DistroProfile
    findings: DryRunFindings = field(default_factory=DryRunFindings)
    nvidia_gpu: bool = False
    ssd: bool = False

    def to_dict(self) -> dict:
        return {
            "distro": self.profile.to_dict(),
            "nvidia_gpu": self.nvidia_gpu,
            "ssd": self.ssd,
            "findings": self.findings.to_dict(),
        }


def run_detect(
    runner: Runner | None = None,
    which: Callable[[str], str | None] = shutil.which,
    os_release_root: Path | None = None,
) -> DetectResult:
    """Probe distro, GPU driver and storage."""
    runner = runner or ShellCommandRunner()
    profile = resolve_profile(read_distro_id(os_release_root))
    return DetectResult(
        profile=profile,
        findings=collect_findings(runner, which),
        nvidia_gpu=detect_nvidia_gpu(runner),
        ssd=has_non_rotational_disk(runner),
    )
