"""Feature branch actions."""

import logging
from textwrap import dedent

from git_rflow.errors import CommandExecutionError
from git_rflow.operations import GitClient, RepositoryInspector, check_preconditions
from git_rflow.output import ActionResult

LOG = logging.getLogger(__name__)


def start_feature(git: GitClient, branch: str) -> ActionResult:
    """Create a feature branch from the current branch and switch to it."""
    inspector = RepositoryInspector(git)
    state = check_preconditions(inspector)

    result = git.create_branch(branch)
    if not result.ok:
        raise CommandExecutionError(result.command, result.output, result.exit_code)
    git.context.trace(LOG, "created %s from %s", branch, state.branch)

    return ActionResult(
        steps=[*inspector.results, result],
        confirmation=f"Switched to a new branch '{branch}'",
        actions=[
            f"A new branch '{branch}' was created, based on '{state.branch}'",
            f"You are now on branch '{branch}'",
        ],
        guidance=dedent(
            f"""\
            Now, start committing on your feature. When done, use:

                 git flow feature finish {branch}"""
        ),
    )
