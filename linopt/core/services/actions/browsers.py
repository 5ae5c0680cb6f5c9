"""Browsers — back up each installed browser's profile directory."""

from __future__ import annotations

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt


def apply_browsers(ctx: RunContext) -> list[Receipt]:
    receipts: list[Receipt] = []

    for browser in ctx.settings.browsers:
        if not ctx.has_tool(browser):
            continue
        profile_dir = ctx.home / f".{browser.lower()}"
        backup_dir = ctx.paths.browser_configs / f"{browser}_backup"
        receipts.append(ctx.run("cp", "-r", str(profile_dir), str(backup_dir)))
        ctx.log.write(f"Enabling preload/prefetch optimizations for {browser}")

    return receipts
