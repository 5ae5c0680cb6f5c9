"""
Distro data — distribution and package-manager tables.

Static tables only, keyed on the PackageManager enum.
"""

from __future__ import annotations

from linopt.core.models.profile import PackageManager

# Distro ids (os-release ``ID=``) accepted without a confirmation prompt.
SUPPORTED_DISTROS: tuple[str, ...] = (
    "ubuntu",
    "debian",
    "linuxmint",
    "fedora",
    "arch",
    "manjaro",
    "opensuse",
    "pop",
    "zorin",
    "elementary",
    "linuxlite",
    "void",
    "puppy",
    "biebian",
    "rebeccablackos",
    "tinycore",
    "alpine",
    "slackware",
)

# Distro id → package manager. Ids missing here resolve to NONE.
DISTRO_PACKAGE_MANAGERS: dict[str, PackageManager] = {
    "ubuntu": PackageManager.APT,
    "debian": PackageManager.APT,
    "linuxmint": PackageManager.APT,
    "pop": PackageManager.APT,
    "elementary": PackageManager.APT,
    "zorin": PackageManager.APT,
    "linuxlite": PackageManager.APT,
    "fedora": PackageManager.DNF,
    "arch": PackageManager.PACMAN,
    "manjaro": PackageManager.PACMAN,
    "opensuse": PackageManager.ZYPPER,
    "void": PackageManager.XBPS,
    "puppy": PackageManager.PETGET,
    "biebian": PackageManager.PETGET,
    "rebeccablackos": PackageManager.PETGET,
    "tinycore": PackageManager.NONE,
    "alpine": PackageManager.NONE,
    "slackware": PackageManager.NONE,
}

# Package manager → (update argv, install argv). Empty tuple = unavailable.
PACKAGE_MANAGER_COMMANDS: dict[PackageManager, tuple[tuple[str, ...], tuple[str, ...]]] = {
    PackageManager.APT: (("apt", "update", "-y"), ("apt", "install", "-y")),
    PackageManager.DNF: (("dnf", "check-update", "-y"), ("dnf", "install", "-y")),
    PackageManager.PACMAN: (("pacman", "-Syu", "--noconfirm"), ("pacman", "-S", "--noconfirm")),
    PackageManager.ZYPPER: (("zypper", "refresh"), ("zypper", "install", "-y")),
    PackageManager.XBPS: (("xbps-install", "-Su"), ("xbps-install", "-y")),
    PackageManager.PETGET: ((), ("petget",)),
    PackageManager.NONE: ((), ()),
}

# Browser binaries whose profile directory (``~/.<name>``) gets backed up.
KNOWN_BROWSERS: tuple[str, ...] = (
    "firefox",
    "chromium",
    "google-chrome",
    "brave-browser",
)
