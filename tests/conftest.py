"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from linopt.adapters.mock import MockRunner
from linopt.core.config.loader import OptimizerSettings
from linopt.core.context import RunContext
from linopt.core.models.profile import DryRunFindings
from linopt.core.persistence.run_log import RunLog
from linopt.core.services.probe.distro import resolve_profile


def _fake_which(*tools: str):
    """PATH lookup that only knows ``tools``."""
    available = set(tools)
    return lambda name: f"/usr/bin/{name}" if name in available else None


@pytest.fixture
def which_with():
    """Factory: PATH lookup knowing only the given tool names."""
    return _fake_which


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Return a temporary home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def mock_runner() -> MockRunner:
    return MockRunner()


@pytest.fixture
def console() -> list[str]:
    """Lines the run log mirrored to the console."""
    return []


@pytest.fixture
def run_log(tmp_path: Path, console: list[str]):
    log = RunLog(tmp_path / "run.log", console=console.append)
    log.start()
    yield log
    log.close()


@pytest.fixture
def make_context(home: Path, mock_runner: MockRunner, run_log: RunLog):
    """Factory for a RunContext wired to the mock runner."""

    def _make(
        tools: tuple[str, ...] = (),
        distro_id: str = "ubuntu",
        findings: DryRunFindings | None = None,
        settings: OptimizerSettings | None = None,
    ) -> RunContext:
        settings = settings or OptimizerSettings()
        paths = settings.paths(home=home)
        paths.ensure()
        return RunContext(
            settings=settings,
            paths=paths,
            profile=resolve_profile(distro_id),
            findings=findings or DryRunFindings(),
            runner=mock_runner,
            log=run_log,
            home=home,
            which=_fake_which(*tools),
        )

    return _make


@pytest.fixture
def os_release_root(tmp_path: Path):
    """Factory: build a filesystem root whose os-release reports ``distro_id``."""

    def _make(distro_id: str) -> Path:
        root = tmp_path / f"root-{distro_id or 'empty'}"
        etc = root / "etc"
        etc.mkdir(parents=True, exist_ok=True)
        if distro_id:
            (etc / "os-release").write_text(
                f'NAME="{distro_id.title()}"\nID={distro_id}\nVERSION_ID="1"\n'
            )
        return root

    return _make
