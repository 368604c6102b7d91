"""Git capability interface for git-rflow."""

import logging
import subprocess
from dataclasses import dataclass

from git_rflow.config import ExecutionContext
from git_rflow.output import OutputFormatter

LOG = logging.getLogger(__name__)

SPAWN_FAILURE_EXIT_CODE = 127


@dataclass(frozen=True, slots=True)
class GitResult:
    """Outcome of one git invocation, stdout and stderr combined."""

    args: tuple[str, ...]
    exit_code: int
    output: str

    @property
    def command(self) -> str:
        return " ".join(("git",) + self.args)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class GitClient:
    """Run git commands one at a time, narrating them through the formatter.

    Every operation returns a GitResult; a non-zero exit is reported in the
    result rather than raised, and callers decide what is fatal.
    """

    def __init__(self, context: ExecutionContext, formatter: OutputFormatter | None = None):
        self.context = context
        self.formatter = formatter or OutputFormatter(context)

    def run(self, args: list[str]) -> GitResult:
        """Run a git command to completion and capture its combined output."""
        result_args = tuple(args)
        cmd = ["git", *result_args]
        self.formatter.command(" ".join(cmd))
        self.context.trace(LOG, "Running git command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                cwd=self.context.cwd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as exc:
            self.context.trace(LOG, "failed to execute git: %s", exc)
            return GitResult(result_args, SPAWN_FAILURE_EXIT_CODE, f"failed to execute git: {exc}")

        result = GitResult(result_args, completed.returncode, completed.stdout or "")
        self.context.trace(LOG, "git exited with %d", result.exit_code)
        self.formatter.output(result.output)
        return result

    def status(self) -> GitResult:
        """Porcelain status; empty output means a clean working tree."""
        return self.run(["status", "--porcelain"])

    def branch_status(self) -> GitResult:
        """Porcelain status with the branch/upstream header line."""
        return self.run(["status", "--porcelain", "--branch"])

    def create_branch(self, branch: str) -> GitResult:
        """Create a branch from HEAD and switch to it."""
        return self.run(["checkout", "-b", branch])

    def switch_branch(self, branch: str) -> GitResult:
        """Switch to an existing branch."""
        return self.run(["checkout", branch])
