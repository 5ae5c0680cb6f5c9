"""
Tests for the run log — truncation, banner, console mirroring.
"""

from pathlib import Path

from linopt.core.persistence.run_log import START_BANNER, RunLog


class TestRunLog:
    def test_start_truncates(self, tmp_path: Path):
        path = tmp_path / "logs" / "run.log"
        path.parent.mkdir()
        path.write_text("old run\n")
        with RunLog(path, console=lambda _m: None) as log:
            log.start()
        text = path.read_text()
        assert "old run" not in text
        assert text.startswith(START_BANNER)

    def test_write_is_file_only(self, tmp_path: Path):
        echoed = []
        with RunLog(tmp_path / "run.log", console=echoed.append) as log:
            log.start()
            log.write("quiet line")
        assert echoed == []
        assert "quiet line\n" in (tmp_path / "run.log").read_text()

    def test_section_mirrors_console(self, tmp_path: Path):
        echoed = []
        with RunLog(tmp_path / "run.log", console=echoed.append) as log:
            log.start()
            log.section("Networking Tweaks")
        assert echoed == ["\n[ Networking Tweaks ]"]
        assert "\n\n[ Networking Tweaks ]\n" in (tmp_path / "run.log").read_text()

    def test_write_before_start_appends(self, tmp_path: Path):
        path = tmp_path / "nested" / "run.log"
        log = RunLog(path, console=lambda _m: None)
        log.write("first")
        log.close()
        log.write("second")
        log.close()
        assert path.read_text() == "first\nsecond\n"

    def test_stream_shares_file(self, tmp_path: Path):
        with RunLog(tmp_path / "run.log", console=lambda _m: None) as log:
            log.start()
            log.write("before")
            log.stream.write("child output\n")
            log.write("after")
        lines = (tmp_path / "run.log").read_text().splitlines()
        assert lines[1:] == ["before", "child output", "after"]
