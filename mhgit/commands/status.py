# MHGIT Status Options
# git status --porcelain=v2 -z [--branch] [--show-stash] [--ignored] [--untracked-files=<mode>] [-- <pathspec>...]

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions, PathStr
from mhgit.runner import GitOutput
from mhgit.status import Status, parse_status


class UntrackedMode(str, Enum):
    """Value of --untracked-files."""

    NO = "no"
    NORMAL = "normal"
    ALL = "all"


class StatusOptions(CommandOptions):
    """Options for ``git status``; always requests the porcelain v2 format."""

    command: ClassVar[str] = "status"
    captures_output: ClassVar[bool] = True

    branch: bool = Field(default=True, description="Include branch headers")
    show_stash: bool = Field(default=False, description="Include the stash count header")
    ignored: bool = Field(default=False, description="Report ignored files")
    untracked_files: Optional[UntrackedMode] = Field(default=None, description="How untracked files are listed")
    pathspecs: list[PathStr] = Field(default_factory=list, description="Limit the status to these paths")

    def git_args(self) -> list[str]:
        pathspecs = self._all_present("pathspecs")

        args = ["status", "--porcelain=v2", "-z"]
        if self.branch:
            args.append("--branch")
        if self.show_stash:
            args.append("--show-stash")
        if self.ignored:
            args.append("--ignored")
        if self.untracked_files is not None:
            args.append(f"--untracked-files={self.untracked_files.value}")
        if pathspecs:
            args.append("--")
            args.extend(pathspecs)
        return args

    def parse_output(self, output: GitOutput) -> Status:
        return parse_status(output.stdout)
