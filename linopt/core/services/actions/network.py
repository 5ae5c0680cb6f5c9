"""Networking — TCP BBR congestion control with the fq qdisc."""

from __future__ import annotations

from pathlib import Path

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt

BBR_MODULE = "tcp_bbr"
MODULES_LOAD_FILE = Path("/etc/modules-load.d/tcp_bbr.conf")


def apply_network(ctx: RunContext) -> list[Receipt]:
    return [
        ctx.run("modprobe", BBR_MODULE),
        ctx.runner.append_line(MODULES_LOAD_FILE, BBR_MODULE),
        ctx.run("sysctl", "-w", "net.core.default_qdisc=fq"),
        ctx.run("sysctl", "-w", "net.ipv4.tcp_congestion_control=bbr"),
    ]
