"""
Action catalog — the seven optimization categories, in run order.

The order is fixed: it is both the execution order and the order of
section headers in the run log.
"""

from __future__ import annotations

from linopt.core.services.actions.base import OptimizationAction
from linopt.core.services.actions.browsers import apply_browsers
from linopt.core.services.actions.cpu import apply_cpu
from linopt.core.services.actions.gpu import apply_gpu
from linopt.core.services.actions.network import apply_network
from linopt.core.services.actions.packaging import apply_flatpak_snap
from linopt.core.services.actions.power import apply_power
from linopt.core.services.actions.ssd import apply_ssd

CATALOG: tuple[OptimizationAction, ...] = (
    OptimizationAction(
        key="power",
        title="Battery & Power Tweaks",
        question="Optimize Battery & Power settings?",
        handler=apply_power,
    ),
    OptimizationAction(
        key="cpu",
        title="CPU & System Performance",
        question="Optimize CPU & System Performance?",
        handler=apply_cpu,
    ),
    OptimizationAction(
        key="gpu",
        title="GPU Optimization",
        question="Apply GPU tweaks?",
        handler=apply_gpu,
    ),
    OptimizationAction(
        key="browsers",
        title="Browser Speed Enhancements",
        question="Optimize Browsers?",
        handler=apply_browsers,
    ),
    OptimizationAction(
        key="flatpak_snap",
        title="Flatpak & Snap Cleanup",
        question="Optimize Flatpak & Snap apps?",
        handler=apply_flatpak_snap,
    ),
    OptimizationAction(
        key="ssd",
        title="SSD Optimizations",
        question="Enable SSD TRIM?",
        handler=apply_ssd,
    ),
    OptimizationAction(
        key="network",
        title="Networking Tweaks",
        question="Enable TCP BBR?",
        handler=apply_network,
    ),
)

__all__ = ["CATALOG", "OptimizationAction"]
