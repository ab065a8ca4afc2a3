import dataclasses
from typing import Annotated

import cyclopts


LogLevelFlag = Annotated[
    str,
    cyclopts.Parameter(
        name=["--log-level"],
        help="Log level (debug, info, warning, error, critical)",
    ),
]

DEFAULT_LOG_LEVEL = "warning"


@cyclopts.Parameter(name="*")
@dataclasses.dataclass(frozen=True)
class GitFlags:
    """Flags controlling how git is invoked."""

    directories: Annotated[
        list[str] | None,
        cyclopts.Parameter(
            name=["-C"],
            help="Run as if git was started in this directory. Can be specified multiple times, each relative to the previous one.",
            negative=(),
        ),
    ] = None
    git_dir: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--git-dir"],
            help="Path to the repository (.git directory). Relative to the -C directory, like git's --git-dir",
        ),
    ] = None
    git_args: Annotated[
        list[str] | None,
        cyclopts.Parameter(
            name=["--git-arg"],
            help="Additional argument to pass to git, before the rev-parse subcommand. Can be specified multiple times.",
            negative=(),
            allow_leading_hyphen=True,
        ),
    ] = None
    git_path: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--git-path"],
            help="Path to the git executable. Set via the GIT_BRANCH_IS_GIT_PATH environment variable or the --git-path flag",
        ),
    ] = None


@cyclopts.Parameter(name="*")
@dataclasses.dataclass(frozen=True)
class CheckFlags(GitFlags):
    """All flags for checking the current branch."""

    ignore_case: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--ignore-case", "-i"],
            help="Compare the branch name case-insensitively",
            negative=(),
        ),
    ] = False
    regex: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--regex", "-r"],
            help="Treat the branch name as a regular expression (matched anywhere in the branch name)",
            negative=(),
        ),
    ] = False
    quiet: Annotated[
        int,
        cyclopts.Parameter(
            name=["--quiet", "-q"],
            help="Suppress the warning message if the branch does not match",
            count=True,
        ),
    ] = 0
    verbose: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--verbose", "-v"],
            help="Print a message if the branch matches",
            negative=(),
        ),
    ] = False
    log_level: LogLevelFlag = DEFAULT_LOG_LEVEL
