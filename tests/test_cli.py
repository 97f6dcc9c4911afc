# Tests for mhgit.cli
# CLI commands using Click testing

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mhgit.cli import cli
from mhgit.runner import GitOutput


@pytest.fixture
def invoke(temp_home: Path, workdir: Path, recorder):
    """Invoke the CLI in workdir with git replaced by the recording runner."""

    def _invoke(*args: str, config: Path = None):
        options = ["-C", str(workdir)]
        if config is not None:
            options += ["--config", str(config)]
        with patch("mhgit.cli.SubprocessRunner") as mock_runner_cls:
            mock_runner_cls.from_config.return_value = recorder
            return CliRunner().invoke(cli, [*options, *args])

    return _invoke


class TestCliGroup:
    """Tests for main CLI group."""

    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "mhgit" in result.output
        for command in ("init", "clone", "commit", "push", "status", "stash", "notes", "remote", "tag"):
            assert command in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "mhgit" in result.output
        assert "1.0.0" in result.output

    def test_invalid_config(self, temp_dir: Path, invoke):
        path = temp_dir / "config.yaml"
        path.write_text("output:\n  mode: tee\n", encoding="utf-8")
        result = invoke("status", config=path)
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestRepositoryCommands:
    """Commands forwarding to git."""

    def test_init(self, invoke, recorder):
        result = invoke("init")
        assert result.exit_code == 0
        assert "Initialized git repository" in result.output
        assert recorder.args == [["init", "-q"]]

    def test_init_uses_configured_branch(self, temp_dir: Path, invoke, recorder):
        path = temp_dir / "config.yaml"
        path.write_text("init:\n  initial_branch: trunk\n", encoding="utf-8")
        result = invoke("init", "--bare", config=path)
        assert result.exit_code == 0
        assert recorder.args == [["init", "-q", "--bare", "--initial-branch=trunk"]]

    def test_clone(self, workdir: Path, invoke, recorder):
        (workdir / "project").mkdir()
        result = invoke("clone", "https://host/project.git", "--depth", "1")
        assert result.exit_code == 0
        assert recorder.args == [["clone", "-q", "--depth", "1", "--", "https://host/project.git"]]

    def test_add_everything(self, invoke, recorder):
        assert invoke("add").exit_code == 0
        assert recorder.args == [["add", "--all"]]

    def test_add_paths(self, invoke, recorder):
        assert invoke("add", "a.txt", "--chmod", "+x").exit_code == 0
        assert recorder.args == [["add", "--chmod=+x", "--", "a.txt"]]

    def test_commit(self, invoke, recorder):
        result = invoke("commit", "-m", "Initial commit", "--allow-empty")
        assert result.exit_code == 0
        assert recorder.args == [["commit", "-q", "-m", "Initial commit", "--allow-empty"]]

    def test_commit_without_message(self, invoke, recorder):
        result = invoke("commit")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "message" in result.output
        assert recorder.calls == []

    def test_push(self, invoke, recorder):
        assert invoke("push", "origin", "main", "-u").exit_code == 0
        assert recorder.args == [["push", "-q", "--set-upstream", "origin", "main"]]

    def test_pull(self, invoke, recorder):
        assert invoke("pull", "--rebase").exit_code == 0
        assert recorder.args == [["pull", "-q", "--rebase"]]

    def test_fetch(self, invoke, recorder):
        assert invoke("fetch", "--all", "--prune").exit_code == 0
        assert recorder.args == [["fetch", "-q", "--all", "--prune"]]

    def test_status(self, invoke, recorder):
        recorder.outputs = [GitOutput(stdout="# branch.oid (initial)\0# branch.head main\0? todo.txt\0")]
        result = invoke("status")
        assert result.exit_code == 0
        assert recorder.args == [["status", "--porcelain=v2", "-z", "--branch"]]
        assert "On branch main" in result.output
        assert "todo.txt" in result.output

    def test_tag(self, invoke, recorder):
        assert invoke("tag", "v1.0", "-m", "Release").exit_code == 0
        assert invoke("tag", "-d", "v1.0").exit_code == 0
        assert recorder.args == [["tag", "-m", "Release", "v1.0"], ["tag", "-d", "v1.0"]]


class TestSubcommandGroups:
    """remote, stash and notes groups."""

    def test_remote(self, invoke, recorder):
        assert invoke("remote", "add", "origin", "https://host/p.git", "--no-tags").exit_code == 0
        assert invoke("remote", "rename", "origin", "upstream").exit_code == 0
        assert invoke("remote", "set-url", "upstream", "https://host/q.git").exit_code == 0
        assert invoke("remote", "remove", "upstream").exit_code == 0
        assert recorder.args == [
            ["remote", "add", "--no-tags", "origin", "https://host/p.git"],
            ["remote", "rename", "origin", "upstream"],
            ["remote", "set-url", "upstream", "https://host/q.git"],
            ["remote", "remove", "upstream"],
        ]

    def test_stash_default_push(self, invoke, recorder):
        assert invoke("stash").exit_code == 0
        assert recorder.args == [["stash", "push", "-q"]]

    def test_stash_default_push_options(self, invoke, recorder):
        assert invoke("stash", "-m", "wip", "-u").exit_code == 0
        assert recorder.args == [["stash", "push", "-q", "--include-untracked", "-m", "wip"]]

    def test_stash_group_options_need_push(self, invoke, recorder):
        result = invoke("stash", "-m", "wip", "pop")
        assert result.exit_code == 2
        assert "stash options must follow 'stash push'" in result.output
        assert recorder.calls == []

    def test_stash_subcommands(self, invoke, recorder):
        assert invoke("stash", "push", "-m", "wip", "-u").exit_code == 0
        assert invoke("stash", "pop", "--index").exit_code == 0
        assert invoke("stash", "apply", "stash@{1}").exit_code == 0
        assert invoke("stash", "drop").exit_code == 0
        assert invoke("stash", "clear").exit_code == 0
        assert recorder.args == [
            ["stash", "push", "-q", "--include-untracked", "-m", "wip"],
            ["stash", "pop", "-q", "--index"],
            ["stash", "apply", "-q", "stash@{1}"],
            ["stash", "drop", "-q"],
            ["stash", "clear"],
        ]

    def test_notes(self, invoke, recorder):
        assert invoke("notes", "add", "Reviewed", "-f").exit_code == 0
        assert invoke("notes", "append", "More", "HEAD~1").exit_code == 0
        assert invoke("notes", "remove").exit_code == 0
        assert recorder.args == [
            ["notes", "add", "-f", "-m", "Reviewed"],
            ["notes", "append", "-m", "More", "HEAD~1"],
            ["notes", "remove"],
        ]


class TestErrorHandling:
    """Mapping of errors to output and exit codes."""

    def test_command_error_exit_code(self, invoke, recorder):
        recorder.outputs = [GitOutput(stderr="error: src refspec main does not match any\n", returncode=1)]
        result = invoke("push", "origin", "main")
        assert result.exit_code == 1
        assert "git push returned error code 1" in result.output
        assert "src refspec main does not match any" in result.output

    def test_fatal_exit_code(self, invoke, recorder):
        recorder.outputs = [GitOutput(stderr="fatal: not a git repository\n", returncode=128)]
        result = invoke("status")
        assert result.exit_code == 128
        assert "not a git repository" in result.output

    def test_missing_repository_path(self, temp_home: Path, temp_dir: Path):
        result = CliRunner().invoke(cli, ["-C", str(temp_dir / "missing"), "add"])
        assert result.exit_code == 1
        assert "Repository path not found" in result.output


class TestConfigCommands:
    """Tests for config group."""

    def test_init_creates_file(self, temp_dir: Path, invoke):
        path = temp_dir / "conf" / "config.yaml"
        result = invoke("config", "init", config=path)
        assert result.exit_code == 0
        assert "Created configuration" in result.output
        assert path.exists()

        result = invoke("config", "init", config=path)
        assert "already exists" in result.output

    def test_show(self, invoke):
        result = invoke("config", "show")
        assert result.exit_code == 0
        assert "Git binary: git" in result.output

    def test_check_valid(self, temp_dir: Path, invoke):
        path = temp_dir / "config.yaml"
        invoke("config", "init", config=path)
        result = invoke("config", "check", str(path))
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_check_invalid(self, temp_dir: Path, invoke):
        path = temp_dir / "config.yaml"
        path.write_text("unknown: 1\n", encoding="utf-8")
        result = invoke("config", "check", str(path))
        assert result.exit_code == 1
        assert "Unknown section 'unknown'" in result.output
