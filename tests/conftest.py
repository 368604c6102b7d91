import subprocess
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from git_rflow.config import configure_logging


def git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return result.stdout


def configure_identity(repo: Path) -> None:
    git("config", "user.name", "Test User", cwd=repo)
    git("config", "user.email", "test@example.com", cwd=repo)


@pytest.fixture(autouse=True)
def c_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep git's messages in English."""
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setenv("LANGUAGE", "C")


@pytest.fixture(autouse=True)
def quiet_logging() -> Generator[None, None, None]:
    """Drop any debug tracing a test switched on."""
    yield
    configure_logging(False)


@pytest.fixture
def cloned_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a bare remote with a master branch and return a fresh clone."""
    remote = tmp_path / "remote.git"
    seed = tmp_path / "seed"
    local = tmp_path / "local"

    subprocess.run(["git", "init", "--bare", str(remote)], check=True, capture_output=True)
    seed.mkdir()
    git("init", cwd=seed)
    configure_identity(seed)
    (seed / "README.md").write_text("# Test Repo")
    git("add", ".", cwd=seed)
    git("commit", "-m", "Initial commit", cwd=seed)
    git("branch", "-M", "master", cwd=seed)
    git("remote", "add", "origin", str(remote), cwd=seed)
    git("push", "-u", "origin", "master", cwd=seed)

    subprocess.run(
        ["git", "clone", "--branch", "master", str(remote), str(local)],
        check=True,
        capture_output=True,
    )
    configure_identity(local)

    yield local


@pytest.fixture
def gone_repo(cloned_repo: Path) -> Path:
    """A clone whose current branch tracks a deleted remote branch."""
    git("checkout", "-b", "topic", cwd=cloned_repo)
    git("push", "-u", "origin", "topic", cwd=cloned_repo)
    git("push", "origin", "--delete", "topic", cwd=cloned_repo)
    return cloned_repo


@pytest.fixture
def unpushed_repo(cloned_repo: Path) -> Path:
    """A clone with one local commit not on its upstream."""
    (cloned_repo / "unpushed").write_text("")
    git("add", "unpushed", cwd=cloned_repo)
    git("commit", "-m", "unpushed", cwd=cloned_repo)
    return cloned_repo


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()
