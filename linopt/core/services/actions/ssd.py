"""SSD — trim mounted filesystems when solid-state storage is present."""

from __future__ import annotations

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt
from linopt.core.services.probe.hardware import has_non_rotational_disk


def apply_ssd(ctx: RunContext) -> list[Receipt]:
    if not has_non_rotational_disk(ctx.runner):
        ctx.log.write("No non-rotational block devices found, skipping TRIM")
        return [Receipt.skip(command="fstrim -av", reason="no SSD detected")]

    return [ctx.run("fstrim", "-av")]
