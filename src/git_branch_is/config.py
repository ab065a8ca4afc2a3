"""Configuration loading from CLI args and env vars."""

from __future__ import annotations

import os

import pydantic

from . import flags

GIT_PATH_ENV_VAR = "GIT_BRANCH_IS_GIT_PATH"
DEFAULT_GIT_PATH = "git"


class ConfigError(Exception): ...


class CheckConfig(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)

    branch_name: str
    regex: bool = False
    ignore_case: bool = False
    quiet: pydantic.NonNegativeInt = 0
    verbose: bool = False
    directories: tuple[str, ...] = ()
    git_dir: str | None = None
    git_args: tuple[str, ...] = ()
    git_path: str = pydantic.Field(default=DEFAULT_GIT_PATH, min_length=1)


def _get_git_path(git_path_flag: str | None) -> str:
    """
    Resolve the git executable.

    Priority: CLI flag > env var > default
    """
    if git_path_flag is not None:
        return git_path_flag
    return os.environ.get(GIT_PATH_ENV_VAR) or DEFAULT_GIT_PATH


def get_check_config(branch_name: str, flags_: flags.CheckFlags) -> CheckConfig:
    try:
        return CheckConfig(
            branch_name=branch_name,
            regex=flags_.regex,
            ignore_case=flags_.ignore_case,
            quiet=flags_.quiet,
            verbose=flags_.verbose,
            directories=tuple(flags_.directories or ()),
            git_dir=flags_.git_dir,
            git_args=tuple(flags_.git_args or ()),
            git_path=_get_git_path(flags_.git_path),
        )
    except pydantic.ValidationError as e:
        raise ConfigError(str(e)) from e
