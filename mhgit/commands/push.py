# MHGIT Push Options
# git push [-q] [--all | --tags] [--force] [--set-upstream] [<repository> [<refspec>...]]

from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class PushOptions(CommandOptions):
    """Options for ``git push``."""

    command: ClassVar[str] = "push"

    remote: Optional[str] = Field(default=None, description="Remote to push to")
    refspecs: list[str] = Field(default_factory=list, description="Refs to push")
    all: bool = Field(default=False, description="Push all branches")
    tags: bool = Field(default=False, description="Push all tags")
    force: bool = Field(default=False, description="Overwrite remote refs")
    set_upstream: bool = Field(default=False, description="Record the upstream of pushed branches")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        remote = self._positional("remote")
        refspecs = self._all_positional("refspecs")
        if refspecs and remote is None:
            raise self._fail("refspecs", "require a 'remote'")
        self._exclusive("all", "tags")
        self._exclusive("all", "refspecs")

        args = ["push"]
        if self.quiet:
            args.append("-q")
        if self.all:
            args.append("--all")
        if self.tags:
            args.append("--tags")
        if self.force:
            args.append("--force")
        if self.set_upstream:
            args.append("--set-upstream")
        if remote is not None:
            args.append(remote)
            args.extend(refspecs)
        return args
