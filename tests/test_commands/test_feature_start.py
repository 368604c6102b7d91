"""Tests for the feature start action."""

import pytest
from pytest_check import check

from git_rflow.commands import ACTIONS, run_command
from git_rflow.commands.feature import start_feature
from git_rflow.config import ExecutionContext
from git_rflow.dispatch import WorkflowCommand
from git_rflow.errors import CommandExecutionError, NotClean
from git_rflow.operations import GitClient

STATUS = ["git", "status", "--porcelain"]
BRANCH_STATUS = ["git", "status", "--porcelain", "--branch"]
CHECKOUT = ["git", "checkout", "-b", "feature1"]


@pytest.fixture
def git():
    return GitClient(ExecutionContext())


def register_clean_repo(fake_process, branch="master"):
    fake_process.register_subprocess(STATUS, stdout="")
    fake_process.register_subprocess(BRANCH_STATUS, stdout=f"## {branch}...origin/{branch}\n")


def test_start_feature(fake_process, git):
    register_clean_repo(fake_process)
    fake_process.register_subprocess(CHECKOUT, stdout="Switched to a new branch 'feature1'\n")

    result = start_feature(git, "feature1")

    check.equal(result.confirmation, "Switched to a new branch 'feature1'")
    check.equal(
        result.actions,
        [
            "A new branch 'feature1' was created, based on 'master'",
            "You are now on branch 'feature1'",
        ],
    )
    check.equal(
        result.guidance,
        "Now, start committing on your feature. When done, use:\n\n"
        "     git flow feature finish feature1",
    )
    check.equal(
        [step.command for step in result.steps],
        ["git status --porcelain", "git status --porcelain --branch", "git checkout -b feature1"],
    )


def test_start_feature_based_on_current_branch(fake_process, git):
    register_clean_repo(fake_process, branch="develop")
    fake_process.register_subprocess(CHECKOUT, stdout="")

    result = start_feature(git, "feature1")

    assert result.actions[0] == "A new branch 'feature1' was created, based on 'develop'"


def test_start_feature_not_clean_creates_nothing(fake_process, git):
    fake_process.register_subprocess(STATUS, stdout="?? dirty\n")

    with pytest.raises(NotClean):
        start_feature(git, "feature1")

    assert fake_process.call_count(CHECKOUT) == 0


def test_start_feature_checkout_failure(fake_process, git):
    register_clean_repo(fake_process)
    fake_process.register_subprocess(
        CHECKOUT,
        returncode=128,
        stdout="fatal: a branch named 'feature1' already exists\n",
    )

    with pytest.raises(CommandExecutionError) as excinfo:
        start_feature(git, "feature1")

    check.equal(excinfo.value.command, "git checkout -b feature1")
    check.equal(excinfo.value.returncode, 128)
    check.is_in("already exists", str(excinfo.value))


def test_run_command_dispatches_registered_action(fake_process, git):
    register_clean_repo(fake_process)
    fake_process.register_subprocess(CHECKOUT, stdout="")

    result = run_command(WorkflowCommand("feature", "start", ("feature1",)), git)

    check.is_in(("feature", "start"), ACTIONS)
    check.equal(result.actions[1], "You are now on branch 'feature1'")
