"""
Narration and summary output for git-rflow.

Command echoes and raw git output are written as each git command runs,
so they stay in invocation order. The summary is written once at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import click

from git_rflow import PROG_NAME
from git_rflow.config import ExecutionContext
from git_rflow.errors import RflowError

if TYPE_CHECKING:
    from git_rflow.operations.executor import GitResult

USAGE_HINT = f"'{PROG_NAME} --help' for usage."


@dataclass
class ActionResult:
    """What a workflow action did, and what the user should do next.

    The last step is the command whose own output confirms the action.
    """

    steps: list["GitResult"] = field(default_factory=list)
    confirmation: str = ""
    actions: list[str] = field(default_factory=list)
    guidance: str = ""


class OutputFormatter:
    """Render command echoes, git output and summaries."""

    def __init__(self, context: ExecutionContext):
        self.context = context

    def command(self, text: str) -> None:
        if self.context.print_git_commands:
            click.echo(text)

    def output(self, text: str) -> None:
        if not self.context.print_git_output or not text:
            return
        click.echo(text, nl=not text.endswith("\n"))

    def summary(self, result: ActionResult) -> None:
        lines = []
        if result.confirmation and not self._confirmed_by_git(result):
            lines.append(result.confirmation)
        lines.append("")
        lines.append("Summary of actions:")
        lines.extend(f"- {action}" for action in result.actions)
        lines.append("")
        lines.append(result.guidance)
        click.echo("\n".join(lines))

    def _confirmed_by_git(self, result: ActionResult) -> bool:
        if not self.context.print_git_output or not result.steps:
            return False
        return bool(result.steps[-1].output.strip())

    def error(self, exc: RflowError) -> None:
        click.echo(f"ERROR: {exc}", err=True)
        click.echo(USAGE_HINT, err=True)
