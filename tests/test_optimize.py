"""
Tests for the use cases — a full optimizer run and the read-only detect.
"""

from pathlib import Path

import pytest

from linopt.adapters.mock import MockRunner
from linopt.core.config.loader import OptimizerSettings
from linopt.core.models.profile import PackageManager, RunMode
from linopt.core.services.actions import CATALOG
from linopt.core.use_cases.detect import run_detect
from linopt.core.use_cases.optimize import COMPLETION_MESSAGE, run_optimizer
from linopt.ui.cli.prompts import ScriptedPrompter

LSPCI_NVIDIA = "01:00.0 VGA compatible controller: NVIDIA Corporation TU106\n"


@pytest.fixture
def optimize(home: Path, os_release_root, which_with):
    """Run the optimizer against a mock runner; returns (result, runner)."""

    def _run(distro_id, answers, tools=(), runner=None, settings=None):
        runner = runner or MockRunner()
        result = run_optimizer(
            settings or OptimizerSettings(),
            ScriptedPrompter(answers),
            runner_factory=lambda _log: runner,
            which=which_with(*tools),
            home=home,
            os_release_root=os_release_root(distro_id),
        )
        return result, runner

    return _run


class TestOptimizeRun:
    def test_full_run(self, optimize, home: Path):
        result, runner = optimize("ubuntu", ["1", "n"])
        assert result.exit_code == 0
        assert result.profile.package_manager is PackageManager.APT
        assert result.report.mode is RunMode.FULL
        assert result.report.executed == [a.key for a in CATALOG]
        assert not result.rebooted
        assert ["reboot"] not in runner.argvs()
        assert result.log_path == (
            home / "Downloads" / "LinuxOptimizer" / "logs" / "linux_optimizer.log"
        )

    def test_directory_tree_created(self, optimize, home: Path):
        optimize("ubuntu", ["1", "n"])
        root = home / "Downloads" / "LinuxOptimizer"
        for sub in ("backups", "logs", "browser_configs", "temp"):
            assert (root / sub).is_dir()

    def test_log_contents(self, optimize):
        result, _ = optimize("ubuntu", ["1", "n"])
        text = result.log_path.read_text()
        assert text.startswith("Starting Linux Optimizer...")
        assert "[ Performing Dry-Run Checks ]" in text
        positions = [text.index(f"[ {a.title} ]") for a in CATALOG]
        assert positions == sorted(positions)
        assert "Summary:" in text
        assert COMPLETION_MESSAGE.strip() in text

    def test_log_truncated_between_runs(self, optimize):
        first, _ = optimize("ubuntu", ["1", "n"])
        second, _ = optimize("ubuntu", ["1", "n"])
        assert second.log_path.read_text().count("Starting Linux Optimizer...") == 1

    def test_reboot_accepted(self, optimize):
        result, runner = optimize("fedora", ["1", "y"])
        assert result.rebooted
        assert runner.argvs()[-1] == ["reboot"]
        assert result.reboot_receipt.ok

    def test_reboot_defaults_yes(self, optimize):
        result, runner = optimize("fedora", ["1", ""])
        assert result.rebooted

    def test_step_by_step(self, optimize):
        answers = ["2", "n", "y", "n", "n", "n", "n", "n", "n"]
        result, runner = optimize("arch", answers)
        assert result.report.executed == ["cpu"]
        assert runner.programs() == ["sysctl", "sysctl", "cp"]

    def test_nvidia_without_driver_skips_gpu(self, optimize):
        runner = MockRunner()
        runner.set_probe_output("lspci", LSPCI_NVIDIA)
        result, _ = optimize("ubuntu", ["1", "n"], runner=runner)
        assert result.findings.reason("GPU") == "NVIDIA driver missing"
        assert ["update-grub"] not in runner.argvs()
        assert "GPU: NVIDIA driver missing" in result.log_path.read_text()

    def test_nvidia_with_driver_runs_gpu(self, optimize):
        runner = MockRunner()
        runner.set_probe_output("lspci", LSPCI_NVIDIA)
        optimize("ubuntu", ["1", "n"], tools=("nvidia-smi",), runner=runner)
        assert ["update-grub"] in runner.argvs()


class TestUnsupportedDistro:
    def test_declined(self, optimize):
        result, runner = optimize("gentoo", ["n"])
        assert result.exit_code == 1
        assert result.report is None
        assert runner.call_count == 0
        text = result.log_path.read_text()
        assert "not officially supported" in text
        assert "Exiting." in text

    def test_default_declines(self, optimize):
        result, _ = optimize("gentoo", [""])
        assert result.error

    def test_accepted_skips_install(self, optimize):
        result, runner = optimize("gentoo", ["y", "1", "n"])
        assert result.exit_code == 0
        assert result.profile.package_manager is PackageManager.NONE
        assert result.report.outcome("power").skipped == 1
        assert runner.argvs()[0] == ["tlp", "start"]


class TestDetect:
    def test_detect(self, os_release_root, which_with):
        runner = MockRunner()
        runner.set_probe_output("lspci", LSPCI_NVIDIA)
        runner.set_probe_output("lsblk", "nvme0n1 0\n")
        result = run_detect(
            runner=runner,
            which=which_with(),
            os_release_root=os_release_root("debian"),
        )
        assert result.profile.id == "debian"
        assert result.nvidia_gpu
        assert result.ssd
        assert runner.call_count == 0
        d = result.to_dict()
        assert d["distro"]["package_manager"] == "apt"
        assert d["findings"] == {"GPU": "NVIDIA driver missing"}
