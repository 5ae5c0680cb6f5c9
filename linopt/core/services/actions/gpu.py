"""GPU — regenerate the bootloader config unless the driver probe failed."""

from __future__ import annotations

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt
from linopt.core.services.probe.hardware import GPU_CATEGORY

# Preferred wrapper first; the raw generators need an explicit output path.
_BOOTLOADER_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("update-grub",),
    ("grub-mkconfig", "-o", "/boot/grub/grub.cfg"),
    ("grub2-mkconfig", "-o", "/boot/grub2/grub.cfg"),
)


def bootloader_command(ctx: RunContext) -> tuple[str, ...]:
    """First bootloader generator on PATH, ``update-grub`` if none is."""
    for argv in _BOOTLOADER_COMMANDS:
        if ctx.has_tool(argv[0]):
            return argv
    return _BOOTLOADER_COMMANDS[0]


def apply_gpu(ctx: RunContext) -> list[Receipt]:
    if GPU_CATEGORY in ctx.findings:
        reason = ctx.findings.reason(GPU_CATEGORY)
        ctx.log.echo(f"Skipping GPU tweaks: {reason}")
        return [Receipt.skip(command="regenerate bootloader config", reason=reason)]

    return [ctx.run(*bootloader_command(ctx))]
