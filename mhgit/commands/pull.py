# MHGIT Pull Options
# git pull [-q] [--rebase | --no-rebase] [--ff-only] [--allow-unrelated-histories] [<repository> [<refspec>...]]

from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class PullOptions(CommandOptions):
    """Options for ``git pull``."""

    command: ClassVar[str] = "pull"

    remote: Optional[str] = Field(default=None, description="Remote to pull from")
    refspecs: list[str] = Field(default_factory=list, description="Refs to merge")
    rebase: Optional[bool] = Field(default=None, description="--rebase when true, --no-rebase when false")
    ff_only: bool = Field(default=False, description="Refuse anything but a fast-forward")
    allow_unrelated_histories: bool = Field(default=False, description="Merge histories without a common base")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        remote = self._positional("remote")
        refspecs = self._all_positional("refspecs")
        if refspecs and remote is None:
            raise self._fail("refspecs", "require a 'remote'")
        self._exclusive("rebase", "ff_only")

        args = ["pull"]
        if self.quiet:
            args.append("-q")
        if self.rebase is not None:
            args.append("--rebase" if self.rebase else "--no-rebase")
        if self.ff_only:
            args.append("--ff-only")
        if self.allow_unrelated_histories:
            args.append("--allow-unrelated-histories")
        if remote is not None:
            args.append(remote)
            args.extend(refspecs)
        return args
