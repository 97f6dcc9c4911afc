# MHGIT Command Options Base
# Shared model behaviour for every subcommand options class

import os
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Iterable, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from mhgit.errors import OptionsError
from mhgit.runner import GitOutput

if TYPE_CHECKING:
    from mhgit.repository import Repository


def _fspath(value: Any) -> Any:
    """Accept pathlib paths wherever git expects a path string."""
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return value


PathStr = Annotated[str, BeforeValidator(_fspath)]


class CommandOptions(BaseModel):
    """
    Full parameter set for one git subcommand.

    Fields are plain named attributes. Nothing is checked for completeness
    until git_args() renders the arguments, which raises OptionsError for a
    missing or empty required value instead of emitting a token git would
    misread. Rendering never mutates the model, so run() can be called any
    number of times.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    command: ClassVar[str] = ""
    # Commands whose stdout is parsed always run with captured output
    captures_output: ClassVar[bool] = False

    def git_args(self) -> list[str]:
        """
        Render the argument vector, subcommand first.

        Raises:
            OptionsError: If a required field is missing or fields conflict.
        """
        raise NotImplementedError

    def parse_output(self, output: GitOutput) -> Any:
        """Convert the output of a successful run into the command's result."""
        return None

    def run(self, repository: "Repository") -> Any:
        """
        Run the command in the given repository.

        Returns:
            The parsed result; None for commands without structured output.
        """
        return repository.run(self)

    # Validation helpers

    def _fail(self, field: str, reason: str) -> OptionsError:
        return OptionsError(self.command, field, reason)

    def _require(self, field: str) -> str:
        value = getattr(self, field)
        if value is None:
            raise self._fail(field, "is required")
        if not str(value).strip():
            raise self._fail(field, "must not be empty")
        return value

    def _optional(self, field: str) -> Optional[str]:
        """Return a set value, rejecting an explicitly empty one."""
        value = getattr(self, field)
        if value is not None and not str(value).strip():
            raise self._fail(field, "must not be empty")
        return value

    def _all_present(self, field: str) -> list[str]:
        values: Iterable[str] = getattr(self, field)
        result = list(values)
        for value in result:
            if not value.strip():
                raise self._fail(field, "must not contain empty values")
        return result

    # Positional values outside a "--" section are parsed by git as options
    # when they start with a dash.

    def _positional(self, field: str, *, required: bool = False) -> Optional[str]:
        value = self._require(field) if required else self._optional(field)
        if value is not None and str(value).startswith("-"):
            raise self._fail(field, "must not start with '-'")
        return value

    def _all_positional(self, field: str) -> list[str]:
        result = self._all_present(field)
        for value in result:
            if value.startswith("-"):
                raise self._fail(field, "must not start with '-'")
        return result

    def _exclusive(self, first: str, second: str) -> None:
        if getattr(self, first) and getattr(self, second):
            raise self._fail(first, f"cannot be combined with '{second}'")
