"""Check the name of the current branch of a git repository."""

from .checker import BranchChecker, InvocationResult
from .cli import UsageError, git_branch_is, git_branch_is_async
from .compare import Comparator, PatternError
from .config import CheckConfig, ConfigError
from .git import GitError

__all__ = [
    "BranchChecker",
    "CheckConfig",
    "Comparator",
    "ConfigError",
    "GitError",
    "InvocationResult",
    "PatternError",
    "UsageError",
    "git_branch_is",
    "git_branch_is_async",
]
