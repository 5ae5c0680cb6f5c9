"""CPU & system — VM tunables plus a sysctl.conf backup."""

from __future__ import annotations

from pathlib import Path

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt

SYSCTL_CONF = Path("/etc/sysctl.conf")


def apply_cpu(ctx: RunContext) -> list[Receipt]:
    settings = ctx.settings
    backup = ctx.paths.backups / "sysctl.conf.bak"
    return [
        ctx.run("sysctl", "-w", f"vm.swappiness={settings.swappiness}"),
        ctx.run("sysctl", "-w", f"vm.vfs_cache_pressure={settings.vfs_cache_pressure}"),
        ctx.run("cp", str(SYSCTL_CONF), str(backup)),
    ]
