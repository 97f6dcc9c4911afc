# MHGIT Stash Options
# git stash push [-q] [--keep-index] [--include-untracked] [-m <msg>] [-- <pathspec>...]
# git stash (pop | apply) [-q] [--index] [<stash>]
# git stash drop [-q] [<stash>]
# git stash clear

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions, PathStr


class StashAction(str, Enum):
    """Sub-action of git stash."""

    PUSH = "push"
    POP = "pop"
    APPLY = "apply"
    DROP = "drop"
    CLEAR = "clear"


class StashOptions(CommandOptions):
    """Options for ``git stash``. The default action saves local changes."""

    command: ClassVar[str] = "stash"

    action: StashAction = Field(default=StashAction.PUSH, description="Sub-action")
    message: Optional[str] = Field(default=None, description="Stash description (push)")
    include_untracked: bool = Field(default=False, description="Stash untracked files too (push)")
    keep_index: bool = Field(default=False, description="Leave staged changes in place (push)")
    pathspecs: list[PathStr] = Field(default_factory=list, description="Limit the stash to these paths (push)")
    index: bool = Field(default=False, description="Restore the index as well (pop, apply)")
    ref: Optional[str] = Field(default=None, description="Stash entry, e.g. stash@{1} (pop, apply, drop)")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        args = ["stash", self.action.value]
        if self.action == StashAction.CLEAR:
            return args
        if self.quiet:
            args.append("-q")

        if self.action == StashAction.PUSH:
            message = self._optional("message")
            pathspecs = self._all_present("pathspecs")
            if self.keep_index:
                args.append("--keep-index")
            if self.include_untracked:
                args.append("--include-untracked")
            if message is not None:
                args.extend(["-m", message])
            if pathspecs:
                args.append("--")
                args.extend(pathspecs)
            return args

        ref = self._positional("ref")
        if self.index and self.action in (StashAction.POP, StashAction.APPLY):
            args.append("--index")
        if ref is not None:
            args.append(ref)
        return args
