"""
Domain models — Pydantic types for the optimizer.

All models are re-exported here for convenient access:

    from linopt.core.models import Command, Receipt, DistroProfile, RunMode
"""

from linopt.core.models.action import Command, Receipt
from linopt.core.models.profile import (
    DistroProfile,
    DryRunFindings,
    PackageManager,
    RunMode,
)

__all__ = [
    # action.py
    "Command",
    "Receipt",
    # profile.py
    "DistroProfile",
    "DryRunFindings",
    "PackageManager",
    "RunMode",
]
