"""
Environment prober — distribution profile and hardware dry-run checks.

Read-only, run once at startup before any optimization.
"""

from linopt.core.services.probe.distro import (  # noqa: F401
    UnsupportedDistroError,
    confirm_distro,
    is_supported,
    read_distro_id,
    resolve_profile,
)
from linopt.core.services.probe.hardware import (  # noqa: F401
    collect_findings,
    detect_nvidia_gpu,
    has_non_rotational_disk,
)
