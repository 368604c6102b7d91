"""Workflow actions, keyed by (branch type, subcommand)."""

from typing import Callable

from git_rflow.dispatch import WorkflowCommand
from git_rflow.operations import GitClient
from git_rflow.output import ActionResult

from .feature import start_feature

ACTIONS: dict[tuple[str, str], Callable[..., ActionResult]] = {
    ("feature", "start"): start_feature,
}


def run_command(command: WorkflowCommand, git: GitClient) -> ActionResult:
    """Run the action registered for a dispatched command."""
    action = ACTIONS[(command.command_type, command.subcommand)]
    return action(git, *command.arguments)
