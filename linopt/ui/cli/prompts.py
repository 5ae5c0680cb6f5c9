"""
Operator prompts — run-mode menu and yes/no gates.

Nothing is ever rejected: malformed answers fall through to "no"
(or to Full mode for the menu).
"""

from __future__ import annotations

from collections.abc import Callable

import click

from linopt.core.models.profile import RunMode

PromptFn = Callable[..., str]


def is_yes(answer: str | None) -> bool:
    """Only a single ``y``/``Y`` counts as yes."""
    return (answer or "") in ("y", "Y")


class Prompter:
    """Interactive prompts on the controlling terminal.

    Args:
        prompt_fn: ``click.prompt``-compatible callable; swapped in tests.
        echo: Output function for the mode menu.
    """

    def __init__(
        self,
        prompt_fn: PromptFn | None = None,
        echo: Callable[[str], None] | None = None,
    ):
        self._prompt = prompt_fn or click.prompt
        self._echo = echo or click.echo

    def yes_no(self, question: str, default: str) -> bool:
        """Ask ``question [default]:``; empty input means ``default``."""
        answer = self._prompt(
            question,
            default=default,
            show_default=True,
            type=str,
        )
        return is_yes(answer)

    def choose_mode(self) -> RunMode:
        """Show the mode menu. Empty or invalid input selects Full."""
        self._echo("\nChoose Optimization Mode:")
        self._echo("1) Full Optimization")
        self._echo("2) Step-by-Step")
        answer = self._prompt(
            "Enter choice [1/2]",
            default=RunMode.FULL.value,
            show_default=False,
            type=str,
        )
        return RunMode.from_choice(answer)


class ScriptedPrompter(Prompter):
    """Prompter fed from a fixed list of answers (tests, demos).

    An exhausted script answers with the empty string, i.e. every
    remaining prompt takes its default.
    """

    def __init__(self, answers: list[str] | None = None):
        self._answers = list(answers or [])
        self.asked: list[str] = []
        super().__init__(prompt_fn=self._next_answer, echo=lambda _msg: None)

    def _next_answer(self, text: str, default: str | None = None, **_: object) -> str:
        self.asked.append(text)
        answer = self._answers.pop(0) if self._answers else ""
        return answer or (default or "")
