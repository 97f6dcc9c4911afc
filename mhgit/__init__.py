"""mhgit - a Python interface over the git command line.

Repository operations (init, clone, add, commit, push, pull, remote,
status, stash, tag, notes) run the installed git executable and return
typed results or raise typed errors.
"""

__version__ = "1.0.0"
__author__ = "Magnus Aa. Hirth"

__all__ = [
    "__version__",
    "Repository",
    "Status",
    "StatusEntry",
    "EntryKind",
    "GitOutput",
    "Runner",
    "SubprocessRunner",
    "OutputMode",
    "GitError",
    "GitNotFoundError",
    "PreconditionError",
    "PathNotFoundError",
    "NotARepositoryError",
    "OptionsError",
    "CommandError",
    "RepositoryLockedError",
    "OutputParseError",
]

_ERRORS = (
    "GitError",
    "GitNotFoundError",
    "PreconditionError",
    "PathNotFoundError",
    "NotARepositoryError",
    "OptionsError",
    "CommandError",
    "RepositoryLockedError",
    "OutputParseError",
)


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name == "Repository":
        from mhgit.repository import Repository

        return Repository
    if name in ("Status", "StatusEntry", "EntryKind"):
        from mhgit import status

        return getattr(status, name)
    if name in ("GitOutput", "Runner", "SubprocessRunner"):
        from mhgit import runner

        return getattr(runner, name)
    if name == "OutputMode":
        from mhgit.config.schema import OutputMode

        return OutputMode
    if name in _ERRORS:
        from mhgit import errors

        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
