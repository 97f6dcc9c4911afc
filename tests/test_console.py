# Tests for mhgit.output.console
# Rich-based console output

import os
from io import StringIO
from pathlib import Path

from rich.console import Console as RichConsole

from mhgit.config.schema import MhgitConfig
from mhgit.errors import CommandError, PathNotFoundError
from mhgit.output.console import Console, create_console
from mhgit.status import EntryKind, Status, StatusEntry


def _make_console(verbose: bool = False) -> Console:
    """Create a console with captured output."""
    console = Console(verbose=verbose, colored=False)
    console._console = RichConsole(file=StringIO(), no_color=True, width=100)
    return console


def _get_output(console: Console) -> str:
    """Get captured output from console."""
    console._console.file.seek(0)
    return console._console.file.read()


class TestConsoleBasic:
    """Tests for basic console methods."""

    def test_print(self):
        c = _make_console()
        c.print("hello world")
        assert "hello world" in _get_output(c)

    def test_print_error(self):
        c = _make_console()
        c.print_error("something failed [x]")
        output = _get_output(c)
        assert "Error:" in output
        assert "something failed [x]" in output

    def test_print_warning(self):
        c = _make_console()
        c.print_warning("be careful")
        output = _get_output(c)
        assert "Warning:" in output
        assert "be careful" in output

    def test_print_success(self):
        c = _make_console()
        c.print_success("all good")
        assert "all good" in _get_output(c)

    def test_print_info(self):
        c = _make_console()
        c.print_info("fyi")
        assert "fyi" in _get_output(c)


class TestConsoleGitError:
    """Tests for print_git_error."""

    def test_command_error(self):
        c = _make_console()
        c.print_git_error(CommandError("push", 1, "error: failed to push some refs to 'origin'\n", args=["push"]))
        output = _get_output(c)
        assert "git push returned error code 1" in output
        assert "error: failed to push some refs to 'origin'" in output
        assert "Command:" not in output

    def test_command_error_verbose(self):
        c = _make_console(verbose=True)
        c.print_git_error(CommandError("push", 1, "", args=["push", "-q", "origin"]))
        assert "Command: git push -q origin" in _get_output(c)

    def test_other_error(self):
        c = _make_console()
        c.print_git_error(PathNotFoundError(Path("/srv/missing")))
        output = _get_output(c)
        assert "Error:" in output
        assert "/srv/missing" in output


class TestConsoleStatus:
    """Tests for print_status."""

    def test_clean(self):
        c = _make_console()
        c.print_status(Status(branch_oid="abc1234", branch_head="main"))
        output = _get_output(c)
        assert "On branch main" in output
        assert "Nothing to commit, working tree clean" in output

    def test_initial(self):
        c = _make_console()
        c.print_status(Status(branch_oid="(initial)", branch_head="main"))
        assert "(no commits yet)" in _get_output(c)

    def test_detached(self):
        c = _make_console()
        c.print_status(Status(branch_oid="abc1234def", branch_head="(detached)"))
        output = _get_output(c)
        assert "HEAD detached" in output
        assert "abc1234" in output

    def test_tracking(self):
        c = _make_console()
        c.print_status(Status(branch_head="main", upstream="origin/main", ahead=2, behind=1))
        assert "Your branch is ahead 2 and behind 1 of 'origin/main'" in _get_output(c)

    def test_up_to_date(self):
        c = _make_console()
        c.print_status(Status(branch_head="main", upstream="origin/main", ahead=0, behind=0))
        assert "up to date with 'origin/main'" in _get_output(c)

    def test_entries(self):
        c = _make_console()
        status = Status(
            branch_head="main",
            stash_count=2,
            entries=[
                StatusEntry(kind=EntryKind.CHANGED, path="src/app.py", index_status="M"),
                StatusEntry(
                    kind=EntryKind.RENAMED,
                    path="new.txt",
                    index_status="R",
                    rename_kind="R",
                    score=90,
                    orig_path="old.txt",
                ),
                StatusEntry(kind=EntryKind.UNTRACKED, path="notes.txt"),
                StatusEntry(kind=EntryKind.IGNORED, path="build/"),
            ],
        )
        c.print_status(status)
        output = _get_output(c)
        assert "src/app.py" in output
        assert "M." in output
        assert "renamed from old.txt (90%)" in output
        assert "notes.txt" in output
        assert "??" in output
        assert "build/" not in output
        assert "2 stash entries" in output

    def test_ignored_shown_on_request(self):
        c = _make_console()
        status = Status(branch_head="main", entries=[StatusEntry(kind=EntryKind.IGNORED, path="build/")])
        c.print_status(status, show_ignored=True)
        output = _get_output(c)
        assert "build/" in output
        assert "!!" in output

    def test_undecodable_path(self):
        c = _make_console()
        status = Status(
            branch_head="main",
            entries=[StatusEntry(kind=EntryKind.UNTRACKED, path=os.fsdecode(b"caf\xe9.txt"))],
        )
        c.print_status(status)
        assert "caf�.txt" in _get_output(c)


class TestConfigSummary:
    def test_summary(self):
        c = _make_console()
        c.print_config_summary("/home/u/.config/mhgit/config.yaml", MhgitConfig())
        output = _get_output(c)
        assert "config.yaml" in output
        assert "Git binary: git" in output
        assert "Output mode: pipe" in output
        assert "(git default)" in output


class TestCreateConsole:
    def test_create(self):
        console = create_console(verbose=True, colored=False)
        assert console.verbose is True
        assert console.rich.no_color is True
