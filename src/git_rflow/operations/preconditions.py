"""
Repository safety checks run before any mutating action.

Checks are an ordered list of (predicate, error) pairs. They are evaluated
in order and the first failing one raises; later checks, and the git
queries only they need, never run.
"""

import logging
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable

from git_rflow.errors import CommandExecutionError, Gone, NotClean, PreconditionError, Unpushed
from git_rflow.operations.executor import GitClient, GitResult

LOG = logging.getLogger(__name__)

BRANCH_HEADER_RE = re.compile(
    r"^## (?:(?:No commits yet|Initial commit) on )?"
    r"(?P<branch>.+?)"
    r"(?:\.\.\.(?P<upstream>\S+))?"
    r"(?: \[(?P<tracking>[^\]]*)\])?$"
)


@dataclass(frozen=True, slots=True)
class BranchHeader:
    """Parsed ``## branch...upstream [tracking]`` line."""

    branch: str
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0
    gone: bool = False


def parse_branch_header(output: str) -> BranchHeader:
    """Parse the header line of ``git status --porcelain --branch``."""
    line = output.splitlines()[0] if output else ""
    match = BRANCH_HEADER_RE.match(line)
    if not match:
        raise ValueError(f"Unexpected branch status line: {line!r}")

    ahead = behind = 0
    gone = False
    for part in (match.group("tracking") or "").split(","):
        part = part.strip()
        if part == "gone":
            gone = True
        elif part.startswith("ahead "):
            ahead = int(part.split()[1])
        elif part.startswith("behind "):
            behind = int(part.split()[1])

    return BranchHeader(
        branch=match.group("branch"),
        upstream=match.group("upstream"),
        ahead=ahead,
        behind=behind,
        gone=gone,
    )


@dataclass(frozen=True, slots=True)
class RepositoryState:
    """Read-only snapshot of the local repository."""

    is_clean: bool
    is_gone: bool
    has_unpushed: bool
    branch: str


class RepositoryInspector:
    """Query repository state lazily, at most once per query."""

    def __init__(self, git: GitClient):
        self.git = git
        self.results: list[GitResult] = []

    def _query(self, result: GitResult) -> GitResult:
        self.results.append(result)
        if not result.ok:
            raise CommandExecutionError(result.command, result.output, result.exit_code)
        return result

    @cached_property
    def is_clean(self) -> bool:
        return not self._query(self.git.status()).output.strip()

    @cached_property
    def header(self) -> BranchHeader:
        result = self._query(self.git.branch_status())
        try:
            return parse_branch_header(result.output)
        except ValueError as exc:
            raise CommandExecutionError(result.command, str(exc)) from exc

    @property
    def is_gone(self) -> bool:
        return self.header.gone

    @property
    def has_unpushed(self) -> bool:
        return self.header.ahead > 0

    def snapshot(self) -> RepositoryState:
        return RepositoryState(
            is_clean=self.is_clean,
            is_gone=self.is_gone,
            has_unpushed=self.has_unpushed,
            branch=self.header.branch,
        )


@dataclass(frozen=True, slots=True)
class Precondition:
    name: str
    passes: Callable[[RepositoryInspector], bool]
    error: type[PreconditionError]


PRECONDITIONS: tuple[Precondition, ...] = (
    Precondition("clean", lambda inspector: inspector.is_clean, NotClean),
    Precondition("gone", lambda inspector: not inspector.is_gone, Gone),
    Precondition("unpushed", lambda inspector: not inspector.has_unpushed, Unpushed),
)


def check_preconditions(
    inspector: RepositoryInspector,
    preconditions: tuple[Precondition, ...] = PRECONDITIONS,
) -> RepositoryState:
    """Run checks in order, raising the first failure's error."""
    for precondition in preconditions:
        inspector.git.context.trace(LOG, "checking precondition: %s", precondition.name)
        if not precondition.passes(inspector):
            raise precondition.error()
    return inspector.snapshot()
