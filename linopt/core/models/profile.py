"""
Host profile models — what the prober learned about this machine.

DistroProfile and DryRunFindings are built once at startup and only
read afterwards. RunMode is chosen once by the operator.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict


class PackageManager(str, Enum):
    """Package managers the optimizer knows how to drive."""

    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    XBPS = "xbps"
    PETGET = "petget"
    NONE = "none"


class DistroProfile(BaseModel):
    """Resolved identity + package-manager command set for the host.

    Commands are argv prefixes; an empty tuple means the distro has no
    such command and callers must skip rather than run it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    package_manager: PackageManager = PackageManager.NONE
    supported: bool = False
    update_command: tuple[str, ...] = ()
    install_command: tuple[str, ...] = ()

    @property
    def can_install(self) -> bool:
        return bool(self.install_command)

    def install_argv(self, *packages: str) -> list[str]:
        """Full install argv for ``packages``.

        Raises:
            ValueError: If the profile has no install command.
        """
        if not self.install_command:
            raise ValueError(
                f"No install command for distro '{self.id or 'unknown'}'"
            )
        return [*self.install_command, *packages]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "supported": self.supported,
            "package_manager": self.package_manager.value,
            "update_command": " ".join(self.update_command),
            "install_command": " ".join(self.install_command),
        }


class DryRunFindings:
    """Category → reason why that category will be skipped.

    Written during probing, read during the catalog run. Entries are
    never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def record(self, category: str, reason: str) -> None:
        self._entries[category] = reason

    def reason(self, category: str) -> str:
        """Recorded reason, or an empty string when nothing was found."""
        return self._entries.get(category, "")

    def __contains__(self, category: object) -> bool:
        return category in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> list[tuple[str, str]]:
        return list(self._entries.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries)


class RunMode(str, Enum):
    """Whether each catalog action asks before running."""

    FULL = "1"
    STEP_BY_STEP = "2"

    @classmethod
    def from_choice(cls, choice: str | None) -> RunMode:
        """Map the menu answer to a mode.

        Only an explicit ``2`` selects step-by-step; empty or
        unrecognised input falls back to FULL.
        """
        if (choice or "").strip() == cls.STEP_BY_STEP.value:
            return cls.STEP_BY_STEP
        return cls.FULL
