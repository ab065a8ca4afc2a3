"""Comparison of the current branch name against the expected one."""

from __future__ import annotations

import dataclasses
import re

from . import config


class PatternError(Exception):
    def __init__(self, pattern: str, reason: str):
        super().__init__(f'Invalid regular expression "{pattern}": {reason}')
        self.pattern = pattern


@dataclasses.dataclass(frozen=True)
class Comparator:
    expected: str
    ignore_case: bool = False
    pattern: re.Pattern[str] | None = None

    @classmethod
    def from_config(cls, config_: config.CheckConfig) -> Comparator:
        """
        Build a comparator, compiling the expected name if it is a regex.

        Raises PatternError for an invalid regex.
        """
        pattern = None
        if config_.regex:
            flags = re.IGNORECASE if config_.ignore_case else 0
            try:
                pattern = re.compile(config_.branch_name, flags)
            except re.error as e:
                raise PatternError(config_.branch_name, str(e)) from e
        return cls(
            expected=config_.branch_name,
            ignore_case=config_.ignore_case,
            pattern=pattern,
        )

    @property
    def is_regex(self) -> bool:
        return self.pattern is not None

    def matches(self, branch: str) -> bool:
        # Regexes match anywhere, callers anchor with ^ and $
        if self.pattern is not None:
            return self.pattern.search(branch) is not None
        if self.ignore_case:
            return branch.casefold() == self.expected.casefold()
        return branch == self.expected
