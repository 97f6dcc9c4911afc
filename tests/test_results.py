# Tests for mhgit.results
# Translation of git exit codes into typed errors

import pytest

from mhgit.errors import CommandError, NotARepositoryError, RepositoryLockedError
from mhgit.results import check_output, error_class_for
from mhgit.runner import GitOutput


class TestCheckOutput:
    def test_success_passes_through(self):
        output = GitOutput(stdout="ok")
        assert check_output("status", ["status"], output) is output

    def test_failure_raises_command_error(self):
        output = GitOutput(stderr="error: failed to push some refs\n", returncode=1, stdout="partial")
        with pytest.raises(CommandError) as exc_info:
            check_output("push", ["push", "origin"], output)
        err = exc_info.value
        assert type(err) is CommandError
        assert err.command == "push"
        assert err.returncode == 1
        assert err.stderr == "error: failed to push some refs\n"
        assert err.stdout == "partial"
        assert err.argv == ["push", "origin"]

    def test_not_a_repository(self):
        output = GitOutput(
            stderr="fatal: not a git repository (or any of the parent directories): .git\n",
            returncode=128,
        )
        with pytest.raises(NotARepositoryError):
            check_output("status", ["status"], output)

    def test_not_a_repository_needs_fatal_exit_code(self):
        output = GitOutput(stderr="warning: not a git repository\n", returncode=1)
        assert error_class_for(output) is CommandError

    def test_locked(self):
        output = GitOutput(
            stderr="fatal: Unable to create '/srv/repo/.git/index.lock': File exists.\n",
            returncode=128,
        )
        with pytest.raises(RepositoryLockedError):
            check_output("add", ["add", "--all"], output)

    def test_other_fatal(self):
        output = GitOutput(stderr="fatal: repository 'nowhere' does not exist\n", returncode=128)
        assert error_class_for(output) is CommandError
