"""
Engine executor — runs the action catalog.

Takes a run mode, gates each catalog entry (Full runs everything,
step-by-step asks first), executes the routines, collects receipts and
produces an end-of-run summary.

Flow:
    catalog → gate → section header → routine → receipts → report
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt
from linopt.core.models.profile import RunMode
from linopt.core.services.actions import CATALOG
from linopt.core.services.actions.base import OptimizationAction

logger = logging.getLogger(__name__)


class GatePrompter(Protocol):
    def yes_no(self, question: str, default: str) -> bool: ...


@dataclass
class ActionOutcome:
    """What happened to one catalog entry."""

    key: str
    title: str
    executed: bool = False
    receipts: list[Receipt] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.receipts if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.receipts if r.failed)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.receipts if r.skipped)

    @property
    def status(self) -> str:
        if not self.executed:
            return "declined"
        if self.failed == 0:
            return "ok"
        if self.succeeded > 0:
            return "partial"
        return "failed"

    def summary_line(self) -> str:
        if not self.executed:
            return f"{self.title}: not selected"
        return (
            f"{self.title}: {self.succeeded} ok, "
            f"{self.failed} failed, {self.skipped} skipped"
        )


@dataclass
class RunReport:
    """Result of running the catalog."""

    mode: RunMode = RunMode.FULL
    outcomes: list[ActionOutcome] = field(default_factory=list)

    @property
    def executed(self) -> list[str]:
        return [o.key for o in self.outcomes if o.executed]

    @property
    def failed(self) -> int:
        return sum(o.failed for o in self.outcomes)

    @property
    def all_ok(self) -> bool:
        return self.failed == 0

    def outcome(self, key: str) -> ActionOutcome | None:
        return next((o for o in self.outcomes if o.key == key), None)

    def summary_lines(self) -> list[str]:
        return [o.summary_line() for o in self.outcomes]


def should_run(action: OptimizationAction, mode: RunMode, prompter: GatePrompter) -> bool:
    """Full mode always runs; step-by-step asks with a "yes" default."""
    if mode is RunMode.FULL:
        return True
    return prompter.yes_no(action.question, "Y")


def run_action(action: OptimizationAction, ctx: RunContext) -> ActionOutcome:
    """Write the section header and run one routine.

    A routine that raises is recorded as a failed receipt; the run
    continues with the next category.
    """
    outcome = ActionOutcome(key=action.key, title=action.title, executed=True)
    ctx.log.section(action.title)

    try:
        outcome.receipts = action.handler(ctx)
    except Exception as e:
        logger.exception("Action %s raised", action.key)
        ctx.log.write(f"Unexpected error in {action.title}: {e}")
        outcome.receipts = [Receipt.failure(command=action.key, error=f"Unexpected error: {e}")]

    for receipt in outcome.receipts:
        if receipt.failed:
            ctx.log.write(f"[failed] {receipt.command}: {receipt.error}")

    status_marker = {"ok": "✓", "partial": "~", "failed": "✗"}.get(outcome.status, "⊘")
    logger.info("%s %s → %s", status_marker, action.key, outcome.status)
    return outcome


def execute_catalog(
    ctx: RunContext,
    mode: RunMode,
    prompter: GatePrompter,
    catalog: Sequence[OptimizationAction] = CATALOG,
) -> RunReport:
    """Run every catalog entry the mode (and operator) allows, in order."""
    report = RunReport(mode=mode)

    for action in catalog:
        if not should_run(action, mode, prompter):
            logger.debug("Operator declined %s", action.key)
            report.outcomes.append(ActionOutcome(key=action.key, title=action.title))
            continue
        report.outcomes.append(run_action(action, ctx))

    return report
