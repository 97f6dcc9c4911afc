# MHGIT Errors
# Typed exceptions for environment, precondition, options, execution and parse failures

from pathlib import Path
from typing import Sequence


class GitError(Exception):
    """Base class for every error raised by mhgit."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GitNotFoundError(GitError):
    """The git executable could not be located or spawned."""

    def __init__(self, binary: str = "git"):
        self.binary = binary
        super().__init__(f"{binary} command not found. Is git installed?")


class PreconditionError(GitError):
    """The repository handle is not usable for the requested operation."""


class PathNotFoundError(PreconditionError):
    """The bound repository path does not exist or is not a directory."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Repository path not found: {self.path}")


class OptionsError(GitError):
    """A command options object cannot be rendered into git arguments."""

    def __init__(self, command: str, field: str, reason: str):
        self.command = command
        self.field = field
        self.reason = reason
        super().__init__(f"git {command}: invalid '{field}': {reason}")


class CommandError(GitError):
    """
    Git exited with a non-zero status.

    The captured stderr is kept exactly as git wrote it so callers can show
    it directly or match on substrings.
    """

    def __init__(
        self,
        command: str,
        returncode: int,
        stderr: str = "",
        *,
        args: Sequence[str] = (),
        stdout: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        self.argv = list(args)
        if returncode < 0:
            summary = f"git {command} was stopped by signal {-returncode}"
        else:
            summary = f"git {command} returned error code {returncode}"
        if stderr.strip():
            summary = f"{summary}: {stderr.strip()}"
        super().__init__(summary)


class NotARepositoryError(CommandError, PreconditionError):
    """Git refused to run because the path is not inside a repository."""


class RepositoryLockedError(CommandError):
    """Another git process holds a lock file in the repository."""


class OutputParseError(GitError):
    """Output of a structured command did not match the expected format."""

    def __init__(self, command: str, line: str, reason: str):
        self.command = command
        self.line = line
        self.reason = reason
        super().__init__(f"unparseable git {command} output ({reason}): {line!r}")
