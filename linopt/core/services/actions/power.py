"""Battery & power — TLP daemon and powertop auto-tune."""

from __future__ import annotations

import logging

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt

logger = logging.getLogger(__name__)


def apply_power(ctx: RunContext) -> list[Receipt]:
    receipts: list[Receipt] = []

    if not ctx.has_tool("tlp"):
        if ctx.profile.can_install:
            receipts.append(ctx.run(*ctx.profile.install_argv("tlp")))
        else:
            reason = f"no package manager for distro '{ctx.profile.id or 'unknown'}'"
            ctx.log.write(f"Skipping tlp install: {reason}")
            receipts.append(Receipt.skip(command="install tlp", reason=reason))

    receipts.append(ctx.run("tlp", "start"))

    if ctx.has_tool("powertop"):
        receipts.append(ctx.run("powertop", "--auto-tune"))

    return receipts
