"""Git helpers for getting the current branch."""

from __future__ import annotations

import asyncio
import logging
import subprocess

from . import config

logger = logging.getLogger(__name__)

REV_PARSE_ARGS = ("rev-parse", "--abbrev-ref", "HEAD")

# Ref names may contain any bytes, keep them intact for comparison
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"


class GitError(Exception):
    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def build_git_args(config_: config.CheckConfig) -> list[str]:
    """
    Build the git command line for printing the current branch.

    Convenience options come first so that explicit git args, which git
    applies later, take precedence.
    """
    args = [config_.git_path]
    for directory in config_.directories:
        args.extend(["-C", directory])
    if config_.git_dir is not None:
        args.append(f"--git-dir={config_.git_dir}")
    args.extend(config_.git_args)
    args.extend(REV_PARSE_ARGS)
    return args


def get_current_branch(config_: config.CheckConfig) -> str:
    """
    Get the current git branch, or the name git reports for a detached HEAD.

    Raises GitError if git can not be run or exits with an error.
    """
    args = build_git_args(config_)
    logger.debug("Running %s", args)
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            encoding=OUTPUT_ENCODING,
            errors=OUTPUT_ERRORS,
        )
    except OSError as e:
        raise GitError(f"Unable to run {config_.git_path}: {e}") from e
    return _parse_output(args, result.returncode, result.stdout, result.stderr)


async def get_current_branch_async(config_: config.CheckConfig) -> str:
    """Like get_current_branch, without blocking the event loop."""
    args = build_git_args(config_)
    logger.debug("Running %s", args)
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise GitError(f"Unable to run {config_.git_path}: {e}") from e
    stdout, stderr = await process.communicate()
    return _parse_output(
        args,
        process.returncode,
        stdout.decode(OUTPUT_ENCODING, OUTPUT_ERRORS),
        stderr.decode(OUTPUT_ENCODING, OUTPUT_ERRORS),
    )


def _parse_output(
    args: list[str], returncode: int | None, stdout: str, stderr: str
) -> str:
    if returncode != 0:
        message = stderr.strip() or f"{args[0]} exited with status {returncode}"
        raise GitError(message, returncode=returncode, stderr=stderr)
    branch = stdout.rstrip()
    logger.info("Current branch is %s", branch)
    return branch
