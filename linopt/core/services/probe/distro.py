"""
Distribution detection — os-release id to DistroProfile.

The id comes from the ``distro`` library (os-release ``ID=``, with its
normalisation, e.g. ``opensuse-leap`` → ``opensuse``). Resolution to a
package manager is a plain table lookup; ids outside the table get a
profile with no commands, and callers skip package installs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import distro

from linopt.core.data.distros import (
    DISTRO_PACKAGE_MANAGERS,
    PACKAGE_MANAGER_COMMANDS,
    SUPPORTED_DISTROS,
)
from linopt.core.models.profile import DistroProfile, PackageManager
from linopt.core.persistence.run_log import RunLog

logger = logging.getLogger(__name__)

SUPPORT_HINT = (
    "Request support by opening an issue that includes the contents "
    "of your /etc/os-release."
)


class UnsupportedDistroError(Exception):
    """Raised when the operator declines to continue on an unsupported distro."""


class YesNoPrompter(Protocol):
    def yes_no(self, question: str, default: str) -> bool: ...


def read_distro_id(root_dir: Path | None = None) -> str:
    """Return the distribution id, or ``""`` when it cannot be read.

    Args:
        root_dir: Alternate filesystem root holding ``etc/os-release``.
            None reads the running system.
    """
    if root_dir is None:
        distro_id = distro.id()
    else:
        distro_id = distro.LinuxDistribution(root_dir=str(root_dir)).id()
    logger.debug("Detected distro id: %r", distro_id)
    return distro_id


def is_supported(distro_id: str) -> bool:
    return distro_id in SUPPORTED_DISTROS


def resolve_profile(distro_id: str) -> DistroProfile:
    """Map a distro id to its package-manager command set."""
    manager = DISTRO_PACKAGE_MANAGERS.get(distro_id, PackageManager.NONE)
    update_cmd, install_cmd = PACKAGE_MANAGER_COMMANDS[manager]
    return DistroProfile(
        id=distro_id,
        package_manager=manager,
        supported=is_supported(distro_id),
        update_command=update_cmd,
        install_command=install_cmd,
    )


def confirm_distro(distro_id: str, log: RunLog, prompter: YesNoPrompter) -> None:
    """Gate the run on unsupported distros.

    Supported ids pass silently. Otherwise the operator is warned and
    asked to continue (default: no).

    Raises:
        UnsupportedDistroError: If the operator declines.
    """
    if is_supported(distro_id):
        return

    shown = distro_id or "unknown"
    log.echo(f"Warning: Your distro ({shown}) is not officially supported.")
    log.echo(SUPPORT_HINT)

    if not prompter.yes_no("Do you want to continue anyway?", "n"):
        log.echo("Exiting.")
        raise UnsupportedDistroError(f"Unsupported distro: {shown}")

    logger.info("Continuing on unsupported distro %r", shown)
