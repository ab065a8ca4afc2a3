"""Message formatting and printing for CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from . import compare

if TYPE_CHECKING:
    from . import checker


def _printable(name: str) -> str:
    # Undecodable bytes from git or argv are shown as escapes
    return name.encode("utf-8", "backslashreplace").decode("utf-8")


def _describe_expected(comparator: compare.Comparator) -> str:
    expected = _printable(comparator.expected)
    if comparator.is_regex:
        return f"/{expected}/"
    return f'"{expected}"'


def match_message(branch: str) -> str:
    branch = _printable(branch)
    return f'Current branch is "{branch}".\n'


def mismatch_message(branch: str, comparator: compare.Comparator) -> str:
    branch = _printable(branch)
    if comparator.is_regex:
        return (
            f'Current branch "{branch}" does not match '
            f"{_describe_expected(comparator)}.\n"
        )
    return f'Current branch is "{branch}", not {_describe_expected(comparator)}.\n'


def pattern_error_message(error: compare.PatternError) -> str:
    return f"{_printable(str(error))}\n"


def print_result(result: checker.InvocationResult) -> None:
    if result.stdout:
        Console(soft_wrap=True).out(result.stdout, end="", highlight=False)
    if result.stderr:
        Console(stderr=True, soft_wrap=True).out(
            result.stderr, end="", highlight=False
        )


def print_error(error_console: Console, error: Exception) -> None:
    error_console.print(f"[red]Error:[/red] {escape(str(error))}")
