# MHGIT Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class OutputMode(str, Enum):
    """Where git's own output goes."""

    PIPE = "pipe"
    PRINT = "print"


class GitConfig(BaseModel):
    """Settings for the git executable and its environment."""

    binary: str = Field(default="git", description="Git executable name or path")
    env: dict[str, str] = Field(default_factory=dict, description="Extra environment variables for git")
    terminal_prompt: bool = Field(
        default=False,
        description="Allow git to prompt for credentials on the terminal",
    )

    @field_validator("binary")
    @classmethod
    def binary_not_empty(cls, v: str) -> str:
        """Reject an empty executable name."""
        if not v.strip():
            raise ValueError("git binary must not be empty")
        return v


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    mode: OutputMode = Field(default=OutputMode.PIPE, description="Capture git output or print it")
    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")


class InitConfig(BaseModel):
    """Defaults for newly initialized repositories."""

    initial_branch: Optional[str] = Field(default=None, description="Name of the initial branch")


class MhgitConfig(BaseModel):
    """Root configuration model for mhgit."""

    git: GitConfig = Field(default_factory=GitConfig, description="Git executable settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
    init: InitConfig = Field(default_factory=InitConfig, description="Repository init settings")
