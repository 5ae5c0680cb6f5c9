"""
Linux Optimizer — CLI entrypoint.

Usage:
    linopt              (same as ``linopt run``)
    linopt run --dry-run
    linopt detect
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from linopt import __version__
from linopt.core.observability.logging_config import setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="linopt")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yml (default: ~/.config/linopt/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Linux Optimizer — tune power, kernel, storage and network settings."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("LINOPT_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("LINOPT_LOG_FILE"),
        log_file_level=os.environ.get("LINOPT_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--dry-run", is_flag=True, help="Log commands instead of running them.")
@click.pass_context
def run(ctx: click.Context, dry_run: bool) -> None:
    """Run the interactive optimizer.

    Detects the distribution, asks for Full or Step-by-Step mode,
    applies the optimization catalog and offers a reboot.
    """
    from linopt.core.config.loader import ConfigError, load_settings
    from linopt.core.use_cases.optimize import run_optimizer
    from linopt.ui.cli.prompts import Prompter

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if dry_run:
        click.secho("[dry-run] Commands will be logged, not executed.", fg="yellow")

    result = run_optimizer(settings, Prompter(), dry_run=dry_run)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    report = result.report
    if report is not None and not result.rebooted:
        click.echo()
        for outcome in report.outcomes:
            color = {
                "ok": "green",
                "partial": "yellow",
                "failed": "red",
            }.get(outcome.status, "white")
            click.secho(f"   {outcome.summary_line()}", fg=color)
        click.echo(f"\n   Log: {result.log_path}")
        click.echo()


@cli.command()
def detect() -> None:
    """Show the detected distro, package manager and dry-run findings."""
    from linopt.core.use_cases.detect import run_detect

    result = run_detect()
    profile = result.profile

    click.secho(f"\n🔍 Distro: {profile.id or 'unknown'}", fg="cyan", bold=True)
    if profile.supported:
        click.secho("   ✓ supported", fg="green")
    else:
        click.secho("   ⚠️  not officially supported", fg="yellow")
    click.echo(f"   Package manager: {profile.package_manager.value}")
    click.echo(f"   Update command:  {' '.join(profile.update_command) or '(none)'}")
    click.echo(f"   Install command: {' '.join(profile.install_command) or '(none)'}")
    click.echo(f"   NVIDIA GPU: {'yes' if result.nvidia_gpu else 'no'}")
    click.echo(f"   SSD present: {'yes' if result.ssd else 'no'}")

    if len(result.findings):
        click.echo()
        click.secho("   Dry-run findings:", fg="yellow")
        for category, reason in result.findings.items():
            click.echo(f"     • {category}: {reason}")

    click.echo()


if __name__ == "__main__":
    cli()
