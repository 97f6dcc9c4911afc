# MHGIT Add Options
# git add [--all | --no-all] [--chmod=(+|-)x] [--] [<pathspec>...]

from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions, PathStr


class AddOptions(CommandOptions):
    """Options for ``git add``."""

    command: ClassVar[str] = "add"

    all: Optional[bool] = Field(default=None, description="--all when true, --no-all when false")
    chmod: Optional[bool] = Field(default=None, description="--chmod=+x when true, --chmod=-x when false")
    pathspecs: list[PathStr] = Field(default_factory=list, description="Files to add")

    def git_args(self) -> list[str]:
        pathspecs = self._all_present("pathspecs")

        args = ["add"]
        if self.all is not None:
            args.append("--all" if self.all else "--no-all")
        if self.chmod is not None:
            args.append("--chmod=+x" if self.chmod else "--chmod=-x")
        if pathspecs:
            args.append("--")
            args.extend(pathspecs)
        return args
