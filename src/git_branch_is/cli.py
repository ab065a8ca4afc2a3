import logging
import sys
from collections.abc import Sequence
from typing import Annotated

import cyclopts
from rich.console import Console
from rich.traceback import install as install_rich_traceback

from . import checker, config, flags, git, output

USAGE = "Usage: git-branch-is [OPTIONS] BRANCH-NAME"

EXIT_USAGE_ERROR = 1
EXIT_ERROR = 2

error_console = Console(stderr=True)

app = cyclopts.App(
    name="git-branch-is",
    help="Assert that the name of the current branch of a git repository has a particular value.",
    error_console=error_console,
)


class UsageError(Exception): ...


@app.default
def check_branch(
    branch_name: Annotated[
        str,
        cyclopts.Parameter(
            help="The expected branch name, or a regular expression with --regex",
        ),
    ],
    *,
    check_flags: flags.CheckFlags = flags.CheckFlags(),
) -> config.CheckConfig:
    """Check that the current branch has a particular name"""
    _setup_logging(check_flags.log_level)
    return config.get_check_config(branch_name, check_flags)


def parse_config(argv: Sequence[str]) -> config.CheckConfig | None:
    """
    Parse command-line arguments (without the program name).

    Returns None if cyclopts handled the arguments itself (--help, --version).
    Raises UsageError for invalid arguments.
    """
    try:
        command, bound, _ = app.parse_args(
            list(argv), print_error=False, exit_on_error=False
        )
    except cyclopts.CycloptsError as e:
        raise UsageError(f"Invalid arguments: {e}\n{USAGE}") from e
    result = command(*bound.args, **bound.kwargs)
    if isinstance(result, config.CheckConfig):
        return result
    return None


def git_branch_is(argv: Sequence[str]) -> checker.InvocationResult:
    """
    Check the current branch as the command line would, capturing output.

    --help and --version are printed by cyclopts directly and are not
    captured; they return an empty result with code 0.

    Raises UsageError for invalid arguments, config.ConfigError for invalid
    option values and git.GitError if the current branch can not be
    determined.
    """
    check_config = parse_config(argv)
    if check_config is None:
        return checker.InvocationResult(code=0)
    return checker.BranchChecker(check_config).check()


async def git_branch_is_async(argv: Sequence[str]) -> checker.InvocationResult:
    """Like git_branch_is, awaiting git without blocking the event loop."""
    check_config = parse_config(argv)
    if check_config is None:
        return checker.InvocationResult(code=0)
    return await checker.BranchChecker(check_config).check_async()


def _setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s [%(name)s] %(message)s",
    )


def main() -> None:
    install_rich_traceback(console=error_console)
    try:
        result = git_branch_is(sys.argv[1:])
    except UsageError as e:
        output.print_error(error_console, e)
        raise SystemExit(EXIT_USAGE_ERROR)
    except (git.GitError, config.ConfigError) as e:
        output.print_error(error_console, e)
        raise SystemExit(EXIT_ERROR)
    output.print_result(result)
    raise SystemExit(result.code)
