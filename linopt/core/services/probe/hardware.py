"""
Hardware probes — GPU driver presence and SSD detection.

Read-only system probes: lspci, nvidia-smi (by PATH lookup), lsblk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from linopt.adapters.base import Runner
from linopt.core.models.action import Command
from linopt.core.models.profile import DryRunFindings

logger = logging.getLogger(__name__)

GPU_CATEGORY = "GPU"
NVIDIA_DRIVER_MISSING = "NVIDIA driver missing"


def detect_nvidia_gpu(runner: Runner) -> bool:
    """Whether any PCI device mentions NVIDIA."""
    receipt = runner.capture(Command(argv=["lspci"]))
    if not receipt.ok:
        logger.debug("lspci unavailable: %s", receipt.error)
        return False
    return any("nvidia" in line.lower() for line in receipt.output.splitlines())


def has_non_rotational_disk(runner: Runner) -> bool:
    """Whether any whole block device reports ROTA=0 (SSD/NVMe)."""
    receipt = runner.capture(Command(argv=["lsblk", "-d", "-n", "-o", "NAME,ROTA"]))
    if not receipt.ok:
        logger.debug("lsblk unavailable: %s", receipt.error)
        return False

    for line in receipt.output.splitlines():
        fields = line.split()
        if len(fields) >= 2 and fields[-1] == "0":
            return True
    return False


def collect_findings(
    runner: Runner,
    which: Callable[[str], str | None],
) -> DryRunFindings:
    """Pre-compute reasons to skip later categories.

    Only the GPU category is probed: an NVIDIA card without
    ``nvidia-smi`` means the proprietary driver is missing.
    """
    findings = DryRunFindings()

    if detect_nvidia_gpu(runner) and which("nvidia-smi") is None:
        findings.record(GPU_CATEGORY, NVIDIA_DRIVER_MISSING)

    for category, reason in findings.items():
        logger.info("Dry-run finding: %s: %s", category, reason)
    return findings
