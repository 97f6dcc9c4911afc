# MHGIT Test Fixtures
# Pytest fixtures for mhgit tests

import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Optional, Sequence

import pytest

from mhgit.config.schema import OutputMode
from mhgit.runner import GitOutput, Runner


class RecordingRunner(Runner):
    """Runner that records argument vectors and replays canned outputs."""

    def __init__(self, *outputs: GitOutput):
        self.calls: list[tuple[list[str], Optional[Path]]] = []
        self.modes: list[OutputMode] = []
        self.outputs = list(outputs)

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> GitOutput:
        self.calls.append((list(args), cwd))
        self.modes.append(self.output)
        if self.outputs:
            return self.outputs.pop(0)
        return GitOutput()

    @property
    def args(self) -> list[list[str]]:
        return [call[0] for call in self.calls]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MHGIT_CONFIG", raising=False)
    return home


@pytest.fixture
def recorder() -> RecordingRunner:
    """Runner that spawns nothing."""
    return RecordingRunner()


@pytest.fixture
def git_home(temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Home directory with a git identity, isolated from the user's git config."""
    (temp_home / ".gitconfig").write_text(
        "[user]\n"
        "\tname = Test User\n"
        "\temail = test@example.com\n"
        "[init]\n"
        "\tdefaultBranch = main\n"
        "[commit]\n"
        "\tgpgsign = false\n"
        "[tag]\n"
        "\tgpgsign = false\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(temp_home.parent))
    for var in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE", "GIT_CONFIG_GLOBAL"):
        monkeypatch.delenv(var, raising=False)
    return temp_home


@pytest.fixture
def workdir(temp_dir: Path) -> Path:
    """Empty directory to create repositories in."""
    path = temp_dir / "work"
    path.mkdir()
    return path
