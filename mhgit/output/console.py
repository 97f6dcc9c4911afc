# MHGIT Console Output
# Rich-based console output for the command line interface

from typing import Optional

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mhgit.config.schema import MhgitConfig
from mhgit.errors import CommandError, GitError
from mhgit.status import EntryKind, Status, StatusEntry

_KIND_STYLES = {
    EntryKind.CHANGED: "yellow",
    EntryKind.RENAMED: "cyan",
    EntryKind.UNMERGED: "red",
    EntryKind.UNTRACKED: "magenta",
    EntryKind.IGNORED: "dim",
}

_KIND_LABELS = {
    EntryKind.CHANGED: "changed",
    EntryKind.RENAMED: "renamed",
    EntryKind.UNMERGED: "unmerged",
    EntryKind.UNTRACKED: "untracked",
    EntryKind.IGNORED: "ignored",
}


def _printable(text: str) -> str:
    """Replace undecodable bytes (kept as surrogates) for display."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for git results and errors.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True, stderr: bool = False):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
            stderr: Write to standard error instead of standard output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, stderr=stderr, highlight=False)

    @property
    def rich(self) -> RichConsole:
        """The wrapped Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(Text.assemble(("Error: ", "red"), _printable(message)))

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{message}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{message}[/blue]")

    def print_git_error(self, error: GitError) -> None:
        """
        Print a mhgit error.

        For failed git commands the exit code and git's own stderr are shown
        unchanged below the summary line.
        """
        if isinstance(error, CommandError):
            self._console.print(
                Text.assemble(("Error: ", "red"), f"git {error.command} returned error code {error.returncode}")
            )
            if error.stderr.strip():
                self._console.print(Text(_printable(error.stderr.rstrip("\n")), style="dim"))
            if self.verbose and error.argv:
                self._console.print(Text(_printable(f"Command: git {' '.join(error.argv)}"), style="dim"))
            return

        self.print_error(error.message)

    def print_status(self, status: Status, *, show_ignored: Optional[bool] = None) -> None:
        """
        Print branch information and a table of status entries.

        Args:
            status: Parsed status.
            show_ignored: Include ignored paths. Defaults to the verbose setting.
        """
        if show_ignored is None:
            show_ignored = self.verbose

        self._console.print(self._branch_line(status))

        if status.upstream:
            tracking = self._tracking_line(status)
            if tracking:
                self._console.print(tracking)

        entries = [e for e in status.entries if show_ignored or e.kind != EntryKind.IGNORED]

        if status.is_clean and not entries:
            self._console.print("[green]Nothing to commit, working tree clean[/green]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("State")
        table.add_column("XY", justify="center")
        table.add_column("Path", style="cyan")
        table.add_column("Details", style="dim")

        for entry in entries:
            style = _KIND_STYLES[entry.kind]
            table.add_row(
                f"[{style}]{_KIND_LABELS[entry.kind]}[/{style}]",
                self._xy(entry),
                Text(_printable(entry.path)),
                Text(_printable(self._details(entry))),
            )

        self._console.print(table)

        if status.stash_count:
            self._console.print(f"[dim]{status.stash_count} stash entr{'y' if status.stash_count == 1 else 'ies'}[/dim]")

    def _branch_line(self, status: Status) -> Text:
        if status.is_detached:
            return Text.assemble(("HEAD detached", "bold yellow"), f" at {status.branch_oid[:7]}")
        head = status.branch_head or "?"
        line = Text.assemble("On branch ", (head, "bold"))
        if status.is_initial:
            line.append(" (no commits yet)", style="dim")
        return line

    def _tracking_line(self, status: Status) -> Optional[str]:
        parts = []
        if status.ahead:
            parts.append(f"ahead {status.ahead}")
        if status.behind:
            parts.append(f"behind {status.behind}")
        if not parts:
            if status.ahead is None:
                return None
            return f"Your branch is up to date with '{status.upstream}'"
        return f"Your branch is {' and '.join(parts)} of '{status.upstream}'"

    @staticmethod
    def _xy(entry: StatusEntry) -> str:
        if entry.kind in (EntryKind.UNTRACKED, EntryKind.IGNORED):
            return entry.kind.value * 2
        return entry.status

    @staticmethod
    def _details(entry: StatusEntry) -> str:
        if entry.kind == EntryKind.RENAMED:
            verb = "copied" if entry.is_copied else "renamed"
            return f"{verb} from {entry.orig_path} ({entry.score}%)"
        if entry.submodule.is_submodule:
            return "submodule"
        return ""

    def print_config_summary(self, config_path: str, config: MhgitConfig) -> None:
        """Print configuration summary."""
        self._console.print(
            Panel(
                f"Config: {config_path}\n"
                f"Git binary: {config.git.binary}\n"
                f"Output mode: {config.output.mode.value}\n"
                f"Initial branch: {config.init.initial_branch or '(git default)'}",
                title="mhgit Configuration",
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True, stderr: bool = False) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.
        stderr: Write to standard error.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored, stderr=stderr)
