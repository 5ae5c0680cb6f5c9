"""Adapters — process execution for the optimizer.

Public re-exports for convenient access.
"""

from linopt.adapters.base import Runner
from linopt.adapters.mock import MockRunner
from linopt.adapters.shell.command import ShellCommandRunner

__all__ = [
    "MockRunner",
    "Runner",
    "ShellCommandRunner",
]
