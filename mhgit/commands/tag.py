# MHGIT Tag Options
# git tag [-f] [-m <msg>] <tagname> [<commit>]
# git tag -d <tagname>

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class TagAction(str, Enum):
    """Whether a tag is created or deleted."""

    CREATE = "create"
    DELETE = "delete"


class TagOptions(CommandOptions):
    """Options for ``git tag``. A message makes the tag annotated."""

    command: ClassVar[str] = "tag"

    action: TagAction = Field(default=TagAction.CREATE, description="Create or delete")
    name: Optional[str] = Field(default=None, description="Tag name")
    message: Optional[str] = Field(default=None, description="Annotation message (create)")
    target: Optional[str] = Field(default=None, description="Commit or object to tag (create)")
    force: bool = Field(default=False, description="Replace an existing tag (create)")

    @classmethod
    def create(
        cls,
        name: str,
        target: Optional[str] = None,
        *,
        message: Optional[str] = None,
        force: bool = False,
    ) -> "TagOptions":
        return cls(action=TagAction.CREATE, name=name, target=target, message=message, force=force)

    @classmethod
    def delete(cls, name: str) -> "TagOptions":
        return cls(action=TagAction.DELETE, name=name)

    def git_args(self) -> list[str]:
        name = self._positional("name", required=True)
        if self.action == TagAction.DELETE:
            return ["tag", "-d", name]

        message = self._optional("message")
        target = self._positional("target")

        args = ["tag"]
        if self.force:
            args.append("-f")
        if message is not None:
            args.extend(["-m", message])
        args.append(name)
        if target is not None:
            args.append(target)
        return args
