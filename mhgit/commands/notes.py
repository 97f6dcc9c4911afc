# MHGIT Notes Options
# git notes add [-f] -m <msg> [<object>] | append -m <msg> [<object>] | remove [<object>]

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from mhgit.commands.base import CommandOptions


class NotesAction(str, Enum):
    """Sub-action of git notes."""

    ADD = "add"
    APPEND = "append"
    REMOVE = "remove"


class NotesOptions(CommandOptions):
    """Options for ``git notes``. The target defaults to HEAD."""

    command: ClassVar[str] = "notes"

    action: NotesAction = Field(default=NotesAction.ADD, description="Sub-action")
    message: Optional[str] = Field(default=None, description="Note text (add, append)")
    target: Optional[str] = Field(default=None, description="Object to annotate")
    force: bool = Field(default=False, description="Overwrite an existing note (add)")

    @classmethod
    def add(cls, message: str, target: Optional[str] = None, *, force: bool = False) -> "NotesOptions":
        return cls(action=NotesAction.ADD, message=message, target=target, force=force)

    @classmethod
    def append(cls, message: str, target: Optional[str] = None) -> "NotesOptions":
        return cls(action=NotesAction.APPEND, message=message, target=target)

    @classmethod
    def remove(cls, target: Optional[str] = None) -> "NotesOptions":
        return cls(action=NotesAction.REMOVE, target=target)

    def git_args(self) -> list[str]:
        target = self._positional("target")

        args = ["notes", self.action.value]
        if self.action == NotesAction.REMOVE:
            if target is not None:
                args.append(target)
            return args

        message = self._require("message")
        if self.force and self.action == NotesAction.ADD:
            args.append("-f")
        args.extend(["-m", message])
        if target is not None:
            args.append(target)
        return args
