from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from git_branch_is import config

BRANCH_NAME = "master"
SUBDIR_NAME = "subdir"

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git is not installed"
)


def make_config(**overrides) -> config.CheckConfig:
    defaults = dict(branch_name=BRANCH_NAME)
    return config.CheckConfig(**{**defaults, **overrides})


def run_git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path, monkeypatch) -> Path:
    """A repository on branch master with one commit, used as the cwd."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / SUBDIR_NAME).mkdir()
    run_git(repo, "init", "-q")
    run_git(repo, "symbolic-ref", "HEAD", f"refs/heads/{BRANCH_NAME}")
    run_git(repo, "commit", "-q", "--allow-empty", "-m", "Initial commit")
    monkeypatch.chdir(repo)
    monkeypatch.delenv(config.GIT_PATH_ENV_VAR, raising=False)
    for var in ("GIT_DIR", "GIT_WORK_TREE"):
        monkeypatch.delenv(var, raising=False)
    return repo


NON_UTF8_BRANCH = b"caf\xe9"


def checkout_non_utf8_branch(repo: Path) -> None:
    subprocess.run(
        ["git", "checkout", "-q", "-b", NON_UTF8_BRANCH],
        cwd=repo,
        capture_output=True,
        check=True,
    )
