"""Flatpak & Snap — drop unused runtimes, update, cap snap revisions."""

from __future__ import annotations

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt


def apply_flatpak_snap(ctx: RunContext) -> list[Receipt]:
    receipts: list[Receipt] = []

    if ctx.has_tool("flatpak"):
        receipts.append(ctx.run("flatpak", "uninstall", "--unused", "-y"))
        receipts.append(ctx.run("flatpak", "update", "-y"))

    if ctx.has_tool("snap"):
        receipts.append(ctx.run("snap", "refresh"))
        receipts.append(
            ctx.run("snap", "set", "system", f"refresh.retain={ctx.settings.snap_retain}")
        )

    return receipts
