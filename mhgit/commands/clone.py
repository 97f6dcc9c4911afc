# MHGIT Clone Options
# git clone [-q] [--bare] [--branch <name>] [--origin <name>] [--depth <n>] [--] <repository> [<directory>]

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions, PathStr
from mhgit.errors import PathNotFoundError
from mhgit.results import check_output
from mhgit.runner import Runner, SubprocessRunner

if TYPE_CHECKING:
    from mhgit.repository import Repository


def humanish_name(url: str, *, bare: bool = False) -> str:
    """
    Directory name git derives from a repository URL.

    Examples:
        "https://host/group/project.git" -> "project"
        "git@host:project.git"           -> "project"
        "/srv/repos/project/.git"        -> "project"
    """
    name = url.rstrip("/")
    if name.endswith("/.git"):
        name = name[: -len("/.git")]
    name = name.rstrip("/")
    name = name.rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if bare:
        name += ".git"
    return name


class CloneOptions(CommandOptions):
    """
    Options for ``git clone``.

    Unlike the other commands a clone does not run inside an existing
    repository; run() takes the directory to clone from and returns a
    handle to the new repository.
    """

    command: ClassVar[str] = "clone"

    url: Optional[str] = Field(default=None, description="Repository to clone")
    directory: Optional[PathStr] = Field(default=None, description="Destination directory")
    branch: Optional[str] = Field(default=None, description="Branch to check out")
    origin: Optional[str] = Field(default=None, description="Name of the upstream remote")
    depth: Optional[int] = Field(default=None, description="Create a shallow clone")
    bare: bool = Field(default=False, description="Make a bare repository")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        url = self._require("url")
        self._optional("directory")
        self._positional("branch")
        self._positional("origin")
        if self.depth is not None and self.depth < 1:
            raise self._fail("depth", "must be a positive integer")

        args = ["clone"]
        if self.quiet:
            args.append("-q")
        if self.bare:
            args.append("--bare")
        if self.branch is not None:
            args.extend(["--branch", self.branch])
        if self.origin is not None:
            args.extend(["--origin", self.origin])
        if self.depth is not None:
            args.extend(["--depth", str(self.depth)])
        args.append("--")
        args.append(url)
        if self.directory is not None:
            args.append(self.directory)
        return args

    def destination(self, cwd: Path) -> Path:
        """Directory the clone is written to when run from cwd."""
        if self.directory is not None:
            target = Path(self.directory)
            return target if target.is_absolute() else cwd / target
        return cwd / humanish_name(self._require("url"), bare=self.bare)

    def run(self, cwd: Optional[Path] = None, runner: Optional[Runner] = None) -> "Repository":  # type: ignore[override]
        """
        Clone the repository.

        Args:
            cwd: Directory git runs in; relative destinations resolve against
                it. Defaults to the current directory.
            runner: Process runner. Defaults to a SubprocessRunner.

        Returns:
            Repository bound to the new clone.

        Raises:
            OptionsError: If no URL is set.
            PathNotFoundError: If cwd does not exist.
            CommandError: If git clone fails.
        """
        from mhgit.repository import Repository

        args = self.git_args()
        workdir = Path(cwd) if cwd is not None else Path.cwd()
        if not workdir.is_dir():
            raise PathNotFoundError(workdir)

        runner = runner or SubprocessRunner()
        check_output(self.command, args, runner.run(args, cwd=workdir))
        return Repository(self.destination(workdir), runner=runner)
