from __future__ import annotations

import dataclasses
import logging
from collections.abc import Awaitable, Callable

from . import compare, config, git, output

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_INVALID_PATTERN = 2


@dataclasses.dataclass(frozen=True)
class InvocationResult:
    code: int
    stdout: str = ""
    stderr: str = ""


@dataclasses.dataclass(frozen=True)
class BranchChecker:
    """
    Compare the current branch against the configured name.

    Git failures propagate as git.GitError. A mismatch is a normal result with
    exit code 1.
    """

    check_config: config.CheckConfig
    get_current_branch: Callable[[config.CheckConfig], str] = git.get_current_branch
    get_current_branch_async: Callable[[config.CheckConfig], Awaitable[str]] = (
        git.get_current_branch_async
    )

    def check(self) -> InvocationResult:
        try:
            comparator = compare.Comparator.from_config(self.check_config)
        except compare.PatternError as e:
            return self._pattern_error(e)
        branch = self.get_current_branch(self.check_config)
        return self._compare(comparator, branch)

    async def check_async(self) -> InvocationResult:
        try:
            comparator = compare.Comparator.from_config(self.check_config)
        except compare.PatternError as e:
            return self._pattern_error(e)
        branch = await self.get_current_branch_async(self.check_config)
        return self._compare(comparator, branch)

    def _pattern_error(self, error: compare.PatternError) -> InvocationResult:
        # Reported regardless of quiet
        logger.info("Invalid pattern %r", error.pattern)
        return InvocationResult(
            code=EXIT_INVALID_PATTERN,
            stderr=output.pattern_error_message(error),
        )

    def _compare(
        self, comparator: compare.Comparator, branch: str
    ) -> InvocationResult:
        if comparator.matches(branch):
            stdout = output.match_message(branch) if self.check_config.verbose else ""
            return InvocationResult(code=EXIT_MATCH, stdout=stdout)

        stderr = ""
        if not self.check_config.quiet:
            stderr = output.mismatch_message(branch, comparator)
        return InvocationResult(code=EXIT_MISMATCH, stderr=stderr)
