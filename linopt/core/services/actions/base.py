"""
Catalog entry definition — one optimization category.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from linopt.core.context import RunContext
from linopt.core.models.action import Receipt

Handler = Callable[[RunContext], list[Receipt]]


@dataclass(frozen=True)
class OptimizationAction:
    """A catalog category.

    Attributes:
        key: Stable identifier (``power``, ``gpu``, ...).
        title: Section header written to the run log.
        question: Step-by-step prompt shown before running.
        handler: Routine applying the tweaks; returns one receipt per
            command or skip decision.
    """

    key: str
    title: str
    question: str
    handler: Handler
