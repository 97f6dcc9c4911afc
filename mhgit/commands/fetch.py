# MHGIT Fetch Options
# git fetch [-q] [--all] [--prune] [--tags] [<repository> [<refspec>...]]

from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class FetchOptions(CommandOptions):
    """Options for ``git fetch``."""

    command: ClassVar[str] = "fetch"

    all: bool = Field(default=False, description="Fetch all remotes")
    prune: bool = Field(default=False, description="Remove deleted remote-tracking refs")
    tags: bool = Field(default=False, description="Fetch all tags")
    remote: Optional[str] = Field(default=None, description="Remote to fetch from")
    refspecs: list[str] = Field(default_factory=list, description="Refs to fetch")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        remote = self._positional("remote")
        refspecs = self._all_positional("refspecs")
        self._exclusive("all", "remote")
        if refspecs and remote is None:
            raise self._fail("refspecs", "require a 'remote'")

        args = ["fetch"]
        if self.quiet:
            args.append("-q")
        if self.all:
            args.append("--all")
        if self.prune:
            args.append("--prune")
        if self.tags:
            args.append("--tags")
        if remote is not None:
            args.append(remote)
            args.extend(refspecs)
        return args
