"""Repository handle.

A Repository binds a directory on disk. Every method spawns one git
process with that directory as working directory; nothing about the
repository is cached between calls.

    from mhgit import Repository

    Repository.init_at("/srv/work/project").add().commit("Initial commit")

Commands needing more than the defaults build an options object and run it:

    from mhgit.commands import PushOptions

    PushOptions(remote="origin", refspecs=["main"], set_upstream=True).run(repo)
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from mhgit.commands import (
    AddOptions,
    CloneOptions,
    CommandOptions,
    CommitOptions,
    FetchOptions,
    InitOptions,
    NotesOptions,
    PullOptions,
    PushOptions,
    RemoteOptions,
    StashOptions,
    StatusOptions,
    TagOptions,
)
from mhgit.config.schema import OutputMode
from mhgit.errors import PathNotFoundError
from mhgit.results import check_output
from mhgit.runner import GitOutput, Runner, SubprocessRunner
from mhgit.status import Status

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class Repository:
    """Handle to a git working directory."""

    __slots__ = ("_path", "_runner")

    def __init__(self, path: PathLike, *, runner: Optional[Runner] = None):
        """
        Bind a handle to an existing directory.

        Args:
            path: Repository directory. Relative paths resolve against the
                current directory.
            runner: Process runner. Defaults to a SubprocessRunner.

        Raises:
            PathNotFoundError: If path is not an existing directory.
        """
        location = Path(path).expanduser()
        if not location.is_dir():
            raise PathNotFoundError(location)
        self._path = location.resolve()
        self._runner = runner or SubprocessRunner()

    @classmethod
    def at(cls, path: PathLike, *, runner: Optional[Runner] = None) -> Repository:
        """Bind a handle to an existing directory (alias of the constructor)."""
        return cls(path, runner=runner)

    @classmethod
    def init_at(cls, path: PathLike, *, runner: Optional[Runner] = None, **options: Any) -> Repository:
        """
        Create the directory if needed and run git init in it.

        Args:
            path: Repository directory.
            runner: Process runner.
            **options: InitOptions fields (bare, initial_branch, quiet).
        """
        init_options = InitOptions(**options)
        location = Path(path).expanduser()
        if not location.exists():
            logger.debug("Creating repository directory %s", location)
            location.mkdir(parents=True, exist_ok=True)
        repository = cls(location, runner=runner)
        repository.run(init_options)
        return repository

    @classmethod
    def clone(
        cls,
        url: str,
        path: PathLike,
        *,
        runner: Optional[Runner] = None,
        **options: Any,
    ) -> Repository:
        """
        Clone url into path and return a handle to the clone.

        Args:
            url: Repository to clone.
            path: Destination directory; git creates it.
            runner: Process runner.
            **options: Further CloneOptions fields (branch, origin, depth, bare).
        """
        return CloneOptions(url=url, directory=path, **options).run(runner=runner)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def runner(self) -> Runner:
        return self._runner

    def __repr__(self) -> str:
        return f"Repository({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def with_output(self, mode: OutputMode) -> Repository:
        """Return a handle to the same path whose git output is piped or printed."""
        clone = copy.copy(self)
        clone._runner = self._runner.with_output(OutputMode(mode))
        return clone

    def is_init(self) -> bool:
        """Return True if the directory holds a .git directory."""
        return (self._path / ".git").is_dir()

    def run(self, options: CommandOptions) -> Any:
        """
        Render options into arguments, run git and translate the outcome.

        Returns:
            Whatever options.parse_output() produces (None for most commands).

        Raises:
            OptionsError: Before any process is spawned, for invalid options.
            PathNotFoundError: If the directory no longer exists.
            CommandError: If git exits non-zero.
        """
        args = options.git_args()
        output = self.git(args, capture=options.captures_output)
        return options.parse_output(output)

    def git(self, args: Sequence[str], *, capture: bool = False) -> GitOutput:
        """
        Run ``git <args>`` in the repository without an options object.

        Args:
            args: Argument vector, subcommand first.
            capture: Capture output even if the runner prints it.

        Returns:
            GitOutput of the successful run.
        """
        args = list(args)
        if not args:
            raise ValueError("git arguments must include a subcommand")
        if not self._path.is_dir():
            raise PathNotFoundError(self._path)

        runner = self._runner
        if capture and runner.output != OutputMode.PIPE:
            runner = runner.with_output(OutputMode.PIPE)
        return check_output(args[0], args, runner.run(args, cwd=self._path))

    # Convenience commands. Each runs the command with default options and
    # returns the handle so calls can be chained; the first failure raises.

    def init(self) -> Repository:
        """Run ``git init``, creating the directory if it is missing."""
        self._path.mkdir(parents=True, exist_ok=True)
        self.run(InitOptions())
        return self

    def add(self) -> Repository:
        """Run ``git add --all``. Use AddOptions for anything else."""
        self.run(AddOptions(all=True))
        return self

    def commit(self, message: str) -> Repository:
        """
        Run ``git commit`` with the given message.

        The commit allows empty changes, so committing with nothing staged
        succeeds. Use CommitOptions for other behaviour.
        """
        self.run(CommitOptions(message=message, allow_empty=True))
        return self

    def fetch(self) -> Repository:
        """Run ``git fetch --all``."""
        self.run(FetchOptions(all=True))
        return self

    def notes(self, message: str) -> Repository:
        """Add a note to HEAD. Use NotesOptions for other notes actions."""
        self.run(NotesOptions.add(message))
        return self

    def pull(self) -> Repository:
        """Run ``git pull`` from the configured upstream."""
        self.run(PullOptions())
        return self

    def push(self) -> Repository:
        """Run ``git push`` to the configured upstream."""
        self.run(PushOptions())
        return self

    def remote(self, name: str, url: str) -> Repository:
        """Add a remote. Use RemoteOptions to remove, rename or change one."""
        self.run(RemoteOptions.add(name, url))
        return self

    def status(self) -> Status:
        """Return the parsed status, including branch headers and ignored files."""
        return self.run(StatusOptions(branch=True, ignored=True))

    def stash(self) -> Repository:
        """Stash local changes."""
        self.run(StashOptions())
        return self

    def tag(self, name: str) -> Repository:
        """Create a lightweight tag on HEAD."""
        self.run(TagOptions.create(name))
        return self
