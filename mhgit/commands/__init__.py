# MHGIT Commands Module
# Options models that render git subcommand argument vectors

from mhgit.commands.add import AddOptions
from mhgit.commands.base import CommandOptions
from mhgit.commands.clone import CloneOptions, humanish_name
from mhgit.commands.commit import CommitOptions
from mhgit.commands.fetch import FetchOptions
from mhgit.commands.init import InitOptions
from mhgit.commands.notes import NotesAction, NotesOptions
from mhgit.commands.pull import PullOptions
from mhgit.commands.push import PushOptions
from mhgit.commands.remote import RemoteAction, RemoteOptions
from mhgit.commands.stash import StashAction, StashOptions
from mhgit.commands.status import StatusOptions, UntrackedMode
from mhgit.commands.tag import TagAction, TagOptions

__all__ = [
    "CommandOptions",
    "AddOptions",
    "CloneOptions",
    "CommitOptions",
    "FetchOptions",
    "InitOptions",
    "NotesAction",
    "NotesOptions",
    "PullOptions",
    "PushOptions",
    "RemoteAction",
    "RemoteOptions",
    "StashAction",
    "StashOptions",
    "StatusOptions",
    "UntrackedMode",
    "TagAction",
    "TagOptions",
    "humanish_name",
]
