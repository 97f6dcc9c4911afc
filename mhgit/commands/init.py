# MHGIT Init Options
# git init [-q] [--bare] [--initial-branch=<name>]

from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class InitOptions(CommandOptions):
    """Options for ``git init``, run inside the repository directory."""

    command: ClassVar[str] = "init"

    bare: bool = Field(default=False, description="Create a bare repository")
    initial_branch: Optional[str] = Field(default=None, description="Name of the initial branch")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        initial_branch = self._optional("initial_branch")

        args = ["init"]
        if self.quiet:
            args.append("-q")
        if self.bare:
            args.append("--bare")
        if initial_branch is not None:
            args.append(f"--initial-branch={initial_branch}")
        return args
