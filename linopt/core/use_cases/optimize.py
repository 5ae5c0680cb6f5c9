"""
Optimize use case — one interactive optimizer run.

This is the top-level orchestrator: it prepares the directory tree and
run log, probes the distro and hardware, asks for a run mode, executes
the catalog, writes the summary and offers a reboot. The full vertical
slice from operator intent to logged side effects.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from linopt.adapters.base import Runner
from linopt.adapters.shell.command import ShellCommandRunner
from linopt.core.config.loader import OptimizerSettings
from linopt.core.context import RunContext
from linopt.core.engine.executor import RunReport, execute_catalog
from linopt.core.models.action import Command, Receipt
from linopt.core.models.profile import DistroProfile, DryRunFindings
from linopt.core.persistence.run_log import RunLog
from linopt.core.services.probe.distro import (
    UnsupportedDistroError,
    confirm_distro,
    read_distro_id,
    resolve_profile,
)
from linopt.core.services.probe.hardware import collect_findings
from linopt.ui.cli.prompts import Prompter

logger = logging.getLogger(__name__)

COMPLETION_MESSAGE = "\nLinux Optimizations Complete! Check the log for details."


@dataclass
class OptimizeResult:
    """Result of an optimizer run."""

    profile: DistroProfile | None = None
    findings: DryRunFindings | None = None
    report: RunReport | None = None
    log_path: Path | None = None
    rebooted: bool = False
    reboot_receipt: Receipt | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.error else 0


def run_optimizer(
    settings: OptimizerSettings,
    prompter: Prompter,
    *,
    runner_factory: Callable[[RunLog], Runner] | None = None,
    which: Callable[[str], str | None] = shutil.which,
    home: Path | None = None,
    os_release_root: Path | None = None,
    dry_run: bool = False,
) -> OptimizeResult:
    """Run the optimizer end to end.

    Args:
        settings: Loaded settings.
        prompter: Source of operator answers.
        runner_factory: Builds the runner from the run log. Defaults to
            a real ShellCommandRunner.
        which: PATH lookup used for every tool-presence check.
        home: Home directory override (profile dirs, ``~`` in base_dir).
        os_release_root: Alternate root holding ``etc/os-release``.
        dry_run: Log commands instead of running them.

    Returns:
        OptimizeResult; ``error`` is set when the run was aborted.
    """
    home = home or Path.home()
    paths = settings.paths(home=home)
    paths.ensure()

    log = RunLog(paths.log_file)
    log.start()
    result = OptimizeResult(log_path=paths.log_file)

    if runner_factory is None:
        runner: Runner = ShellCommandRunner(log=log, dry_run=dry_run)
    else:
        runner = runner_factory(log)

    try:
        # ── Environment probe ──
        distro_id = read_distro_id(os_release_root)
        try:
            confirm_distro(distro_id, log, prompter)
        except UnsupportedDistroError as e:
            result.error = str(e)
            return result

        profile = resolve_profile(distro_id)
        result.profile = profile
        log.write(
            f"Distro: {profile.id or 'unknown'} "
            f"(package manager: {profile.package_manager.value})"
        )

        log.section("Performing Dry-Run Checks")
        findings = collect_findings(runner, which)
        for category, reason in findings.items():
            log.write(f"{category}: {reason}")
        result.findings = findings

        # ── Catalog ──
        mode = prompter.choose_mode()
        logger.info("Run mode: %s", mode.name)

        ctx = RunContext(
            settings=settings,
            paths=paths,
            profile=profile,
            findings=findings,
            runner=runner,
            log=log,
            home=home,
            which=which,
        )
        report = execute_catalog(ctx, mode, prompter)
        result.report = report

        log.write("")
        log.write("Summary:")
        for line in report.summary_lines():
            log.write(f"  {line}")

        log.echo(COMPLETION_MESSAGE)

        # ── Reboot (the point of no return) ──
        if prompter.yes_no("Do you want to reboot now?", "y"):
            log.echo("Rebooting...")
            result.rebooted = True
            result.reboot_receipt = runner.run(Command(argv=["reboot"]))

        return result
    finally:
        log.close()
