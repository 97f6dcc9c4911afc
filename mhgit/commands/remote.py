# MHGIT Remote Options
# git remote add [-t <branch>] [-m <master>] [--tags | --no-tags] <name> <url>
# git remote remove <name>
# git remote rename <old> <new>
# git remote set-url <name> <newurl>

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class RemoteAction(str, Enum):
    """Sub-action of git remote."""

    ADD = "add"
    REMOVE = "remove"
    RENAME = "rename"
    SET_URL = "set-url"


class RemoteOptions(CommandOptions):
    """
    Options for ``git remote``.

    The sub-action is a single enum value, so add and remove can never be
    requested together. Fields that do not apply to the chosen action are
    left out of the argument list.
    """

    command: ClassVar[str] = "remote"

    action: RemoteAction = Field(default=RemoteAction.ADD, description="Sub-action")
    name: Optional[str] = Field(default=None, description="Remote name")
    url: Optional[str] = Field(default=None, description="Remote URL (add, set-url)")
    new_name: Optional[str] = Field(default=None, description="New remote name (rename)")
    master: Optional[str] = Field(default=None, description="Branch the remote HEAD points to (add)")
    tags: Optional[bool] = Field(default=None, description="--tags when true, --no-tags when false (add)")
    track: list[str] = Field(default_factory=list, description="Branches to track (add)")

    @classmethod
    def add(cls, name: str, url: str, **kwargs) -> "RemoteOptions":
        return cls(action=RemoteAction.ADD, name=name, url=url, **kwargs)

    @classmethod
    def remove(cls, name: str) -> "RemoteOptions":
        return cls(action=RemoteAction.REMOVE, name=name)

    @classmethod
    def rename(cls, name: str, new_name: str) -> "RemoteOptions":
        return cls(action=RemoteAction.RENAME, name=name, new_name=new_name)

    @classmethod
    def set_url(cls, name: str, url: str) -> "RemoteOptions":
        return cls(action=RemoteAction.SET_URL, name=name, url=url)

    def git_args(self) -> list[str]:
        name = self._positional("name", required=True)
        args = ["remote", self.action.value]

        if self.action == RemoteAction.ADD:
            url = self._positional("url", required=True)
            master = self._positional("master")
            for branch in self._all_positional("track"):
                args.extend(["-t", branch])
            if master is not None:
                args.extend(["-m", master])
            if self.tags is not None:
                args.append("--tags" if self.tags else "--no-tags")
            args.extend([name, url])
        elif self.action == RemoteAction.REMOVE:
            args.append(name)
        elif self.action == RemoteAction.RENAME:
            args.extend([name, self._positional("new_name", required=True)])
        elif self.action == RemoteAction.SET_URL:
            args.extend([name, self._positional("url", required=True)])

        return args
