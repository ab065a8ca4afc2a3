from unittest.mock import AsyncMock, Mock

import pytest

from git_branch_is.checker import BranchChecker, InvocationResult
from git_branch_is.git import GitError
from tests.conftest import make_config


def make_checker(branch: str = "master", **overrides) -> BranchChecker:
    return BranchChecker(
        check_config=make_config(**overrides),
        get_current_branch=Mock(return_value=branch),
        get_current_branch_async=AsyncMock(return_value=branch),
    )


class TestCheck:
    def test_match_is_silent(self):
        checker = make_checker(branch_name="master")

        assert checker.check() == InvocationResult(code=0, stdout="", stderr="")
        checker.get_current_branch.assert_called_once_with(checker.check_config)

    def test_match_verbose(self):
        checker = make_checker(branch_name="master", verbose=True)

        result = checker.check()

        assert result.code == 0
        assert "master" in result.stdout
        assert result.stderr == ""

    def test_mismatch(self):
        checker = make_checker(branch_name="invalid")

        result = checker.check()

        assert result.code == 1
        assert result.stdout == ""
        assert '"master"' in result.stderr
        assert '"invalid"' in result.stderr

    def test_mismatch_quiet(self):
        checker = make_checker(branch_name="invalid", quiet=1)

        assert checker.check() == InvocationResult(code=1)

    def test_mismatch_regex(self):
        checker = make_checker(branch_name="^main$", regex=True)

        result = checker.check()

        assert result.code == 1
        assert "master" in result.stderr
        assert "/^main$/" in result.stderr

    def test_ignore_case(self):
        checker = make_checker(branch_name="MASTER", ignore_case=True)

        assert checker.check().code == 0

    def test_regex_match(self):
        checker = make_checker(branch_name="ast", regex=True)

        assert checker.check().code == 0

    @pytest.mark.parametrize("quiet", [0, 1, 2])
    def test_invalid_pattern(self, quiet):
        checker = make_checker(branch_name="b[ad", regex=True, quiet=quiet)

        result = checker.check()

        assert result.code == 2
        assert result.stdout == ""
        assert "b[ad" in result.stderr
        checker.get_current_branch.assert_not_called()

    def test_git_error_propagates(self):
        checker = make_checker()
        checker.get_current_branch.side_effect = GitError("not a git repository")

        with pytest.raises(GitError):
            checker.check()


class TestCheckAsync:
    @pytest.mark.asyncio
    async def test_match(self):
        checker = make_checker(branch_name="master")

        assert await checker.check_async() == InvocationResult(code=0)
        checker.get_current_branch_async.assert_awaited_once_with(
            checker.check_config
        )
        checker.get_current_branch.assert_not_called()

    @pytest.mark.asyncio
    async def test_mismatch(self):
        checker = make_checker(branch_name="invalid")

        result = await checker.check_async()

        assert result.code == 1
        assert "invalid" in result.stderr

    @pytest.mark.asyncio
    async def test_invalid_pattern(self):
        checker = make_checker(branch_name="b[ad", regex=True, quiet=1)

        result = await checker.check_async()

        assert result.code == 2
        assert "b[ad" in result.stderr
        checker.get_current_branch_async.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_git_error_propagates(self):
        checker = make_checker()
        checker.get_current_branch_async.side_effect = GitError("git not found")

        with pytest.raises(GitError):
            await checker.check_async()
