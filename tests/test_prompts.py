"""
Tests for operator prompts — yes/no gates and the run-mode menu.
"""

import pytest

from linopt.core.models.profile import RunMode
from linopt.ui.cli.prompts import Prompter, ScriptedPrompter, is_yes


def _prompter(answers, echoed=None):
    """Prompter whose prompt function mimics click.prompt defaults."""
    calls = []

    def prompt_fn(text, default=None, **kwargs):
        calls.append((text, default, kwargs))
        answer = answers.pop(0)
        return answer or default

    p = Prompter(prompt_fn=prompt_fn, echo=(echoed.append if echoed is not None else None))
    return p, calls


class TestIsYes:
    @pytest.mark.parametrize("answer", ["y", "Y"])
    def test_yes(self, answer):
        assert is_yes(answer)

    @pytest.mark.parametrize("answer", ["n", "N", "", None, "yes", "YES", " y", "1"])
    def test_everything_else_is_no(self, answer):
        assert not is_yes(answer)


class TestYesNo:
    def test_default_used_on_empty(self):
        p, calls = _prompter([""])
        assert p.yes_no("Optimize Browsers?", "Y")
        assert calls[0][0] == "Optimize Browsers?"
        assert calls[0][1] == "Y"
        assert calls[0][2]["show_default"] is True

    def test_default_no(self):
        p, _ = _prompter([""])
        assert not p.yes_no("Do you want to continue anyway?", "n")

    def test_explicit_answer(self):
        p, _ = _prompter(["n"])
        assert not p.yes_no("Enable TCP BBR?", "Y")


class TestChooseMode:
    def test_menu_echoed(self):
        echoed = []
        p, calls = _prompter(["1"], echoed)
        assert p.choose_mode() is RunMode.FULL
        assert echoed == [
            "\nChoose Optimization Mode:",
            "1) Full Optimization",
            "2) Step-by-Step",
        ]
        assert calls[0][0] == "Enter choice [1/2]"

    def test_step_by_step(self):
        p, _ = _prompter(["2"])
        assert p.choose_mode() is RunMode.STEP_BY_STEP

    @pytest.mark.parametrize("answer", ["", "3", "full"])
    def test_fallback_full(self, answer):
        p, _ = _prompter([answer])
        assert p.choose_mode() is RunMode.FULL


class TestScriptedPrompter:
    def test_answers_in_order(self):
        p = ScriptedPrompter(["2", "n"])
        assert p.choose_mode() is RunMode.STEP_BY_STEP
        assert not p.yes_no("Optimize Browsers?", "Y")
        assert p.asked == ["Enter choice [1/2]", "Optimize Browsers?"]

    def test_exhausted_uses_defaults(self):
        p = ScriptedPrompter()
        assert p.choose_mode() is RunMode.FULL
        assert p.yes_no("Enable SSD TRIM?", "Y")
        assert not p.yes_no("Do you want to continue anyway?", "n")
