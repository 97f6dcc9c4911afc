# MHGIT Process Runner
# Spawns the git executable and captures stdout, stderr and exit code

import copy
import logging
import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from mhgit.config.schema import OutputMode
from mhgit.errors import GitNotFoundError, PathNotFoundError

if TYPE_CHECKING:
    from mhgit.config.schema import MhgitConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitOutput:
    """Raw outcome of one git invocation."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Runner(ABC):
    """
    Executes git with an argument vector in a working directory.

    Implementations spawn at most one child process per call and never
    raise for a non-zero exit; turning exit codes into errors is left to
    mhgit.results.
    """

    output: OutputMode = OutputMode.PIPE

    @abstractmethod
    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> GitOutput:
        """
        Run ``git <args>``.

        Args:
            args: Arguments following the executable, subcommand first.
            cwd: Working directory. None means the current directory.

        Returns:
            GitOutput with the captured streams and exit code.

        Raises:
            GitNotFoundError: If the executable cannot be spawned.
            PathNotFoundError: If cwd vanished before the process started.
        """

    def with_output(self, output: OutputMode) -> "Runner":
        """Return a copy of this runner using the given output mode."""
        clone = copy.copy(self)
        clone.output = output
        return clone


class SubprocessRunner(Runner):
    """Runner backed by subprocess.run."""

    def __init__(
        self,
        binary: str = "git",
        *,
        env: Optional[Mapping[str, str]] = None,
        output: OutputMode = OutputMode.PIPE,
        terminal_prompt: bool = False,
    ):
        self.binary = binary
        self.env = dict(env or {})
        self.output = OutputMode(output)
        self.terminal_prompt = terminal_prompt

    @classmethod
    def from_config(cls, config: "MhgitConfig") -> "SubprocessRunner":
        """Build a runner from a loaded configuration."""
        return cls(
            config.git.binary,
            env=config.git.env,
            output=config.output.mode,
            terminal_prompt=config.git.terminal_prompt,
        )

    def __repr__(self) -> str:
        return f"SubprocessRunner(binary={self.binary!r}, output={self.output.value!r})"

    def _environment(self) -> dict[str, str]:
        env = os.environ.copy()
        env.update(self.env)
        if not self.terminal_prompt:
            env["GIT_TERMINAL_PROMPT"] = "0"
        return env

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> GitOutput:
        cmd = [self.binary, *args]
        capture = self.output == OutputMode.PIPE
        logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                capture_output=capture,
                # Undecodable bytes (paths, localized messages) survive as
                # surrogates; os.fsencode() restores the original bytes
                encoding="utf-8",
                errors="surrogateescape",
                env=self._environment(),
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            # chdir failures report the working directory as the filename
            if cwd is not None and e.filename is not None and Path(e.filename) == Path(cwd):
                raise PathNotFoundError(Path(cwd)) from e
            raise GitNotFoundError(self.binary) from e
        except PermissionError as e:
            raise GitNotFoundError(self.binary) from e

        if result.returncode != 0:
            logger.debug("%s exited with code %d", " ".join(cmd), result.returncode)

        return GitOutput(
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )
