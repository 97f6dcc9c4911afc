# MHGIT Result Translation
# Maps raw git outcomes onto success values or typed errors

import logging
import re
from typing import Sequence

from mhgit.errors import CommandError, NotARepositoryError, RepositoryLockedError
from mhgit.runner import GitOutput

logger = logging.getLogger(__name__)

# git exits with 128 for fatal errors, including running outside a repository
FATAL_EXIT_CODE = 128

_NOT_A_REPOSITORY = re.compile(r"not a git repository", re.IGNORECASE)
_LOCKED = re.compile(
    r"unable to create '[^']+\.lock'|another git process seems to be running",
    re.IGNORECASE,
)


def check_output(command: str, args: Sequence[str], output: GitOutput) -> GitOutput:
    """
    Return the output of a successful invocation, raise for a failed one.

    Args:
        command: Subcommand name used in error messages (e.g. "push").
        args: Full argument vector that was run.
        output: Raw runner outcome.

    Returns:
        The same GitOutput when git exited with 0.

    Raises:
        NotARepositoryError: Git reported the directory is not a repository.
        RepositoryLockedError: Git could not take a repository lock.
        CommandError: Any other non-zero exit.
    """
    if output.returncode == 0:
        return output

    error_cls = error_class_for(output)
    logger.debug("git %s failed (%s, exit %d)", command, error_cls.__name__, output.returncode)
    raise error_cls(
        command,
        output.returncode,
        output.stderr,
        args=args,
        stdout=output.stdout,
    )


def error_class_for(output: GitOutput) -> type[CommandError]:
    """Pick the CommandError subclass matching git's diagnostic."""
    if output.returncode == FATAL_EXIT_CODE and _NOT_A_REPOSITORY.search(output.stderr):
        return NotARepositoryError
    if _LOCKED.search(output.stderr):
        return RepositoryLockedError
    return CommandError
