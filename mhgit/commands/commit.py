# MHGIT Commit Options
# git commit [-q] [-a] [--amend] [-m <msg>] [--allow-empty] [--no-edit] [--author=<author>] [--] [<pathspec>...]

import re
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions, PathStr

_AUTHOR = re.compile(r"^[^<>]+ <[^<>]+>$")


class CommitOptions(CommandOptions):
    """Options for ``git commit``."""

    command: ClassVar[str] = "commit"

    message: Optional[str] = Field(default=None, description="Commit message")
    all: bool = Field(default=False, description="Stage modified and deleted files first")
    allow_empty: bool = Field(default=False, description="Allow a commit without changes")
    amend: bool = Field(default=False, description="Replace the tip of the current branch")
    no_edit: bool = Field(default=False, description="Reuse the previous message when amending")
    author: Optional[str] = Field(default=None, description="Author override, 'Name <email>'")
    files: list[PathStr] = Field(default_factory=list, description="Commit only these paths")
    quiet: bool = Field(default=True, description="Pass -q")

    def git_args(self) -> list[str]:
        files = self._all_present("files")
        self._exclusive("all", "files")
        self._exclusive("message", "no_edit")
        if self.no_edit and not self.amend:
            raise self._fail("no_edit", "requires 'amend'")
        if not self.no_edit:
            self._require("message")
        if self.author is not None and not _AUTHOR.match(self.author):
            raise self._fail("author", "Invalid author format, expected 'Name <email>'")

        args = ["commit"]
        if self.quiet:
            args.append("-q")
        if self.all:
            args.append("--all")
        if self.amend:
            args.append("--amend")
        if self.message is not None:
            args.extend(["-m", self.message])
        if self.allow_empty:
            args.append("--allow-empty")
        if self.no_edit:
            args.append("--no-edit")
        if self.author is not None:
            args.append(f"--author={self.author}")
        if files:
            args.append("--")
            args.extend(files)
        return args
