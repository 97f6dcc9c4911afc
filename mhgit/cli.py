"""Click-based CLI for mhgit."""

from __future__ import annotations

import functools
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console as RichConsole
from rich.logging import RichHandler

from mhgit import __version__
from mhgit.commands import (
    AddOptions,
    CloneOptions,
    CommitOptions,
    FetchOptions,
    NotesOptions,
    PullOptions,
    PushOptions,
    RemoteOptions,
    StashAction,
    StashOptions,
    StatusOptions,
    TagOptions,
)
from mhgit.config import (
    MhgitConfig,
    ensure_config_exists,
    get_config_path,
    load_or_default,
    validate_config_file,
)
from mhgit.errors import CommandError, GitError
from mhgit.output import Console
from mhgit.repository import Repository
from mhgit.runner import SubprocessRunner

console = Console()


@dataclass
class CliState:
    """Objects shared by all commands of one invocation."""

    config: MhgitConfig
    config_path: Path
    repo_path: Path
    runner: SubprocessRunner

    def repository(self) -> Repository:
        return Repository.at(self.repo_path, runner=self.runner)


pass_state = click.make_pass_decorator(CliState)


def _setup_logging(verbose: bool) -> None:
    """Route mhgit library logging to a Rich handler on stderr."""
    if not verbose:
        return
    logger = logging.getLogger("mhgit")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=RichConsole(stderr=True), show_time=False, show_path=False))


def handle_git_errors(func: Callable) -> Callable:
    """Print mhgit errors and exit with git's exit code (or 1)."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except GitError as e:
            console.print_git_error(e)
            code = e.returncode if isinstance(e, CommandError) and e.returncode > 0 else 1
            sys.exit(code)

    return wrapper


@click.group()
@click.version_option(version=__version__, prog_name="mhgit")
@click.option(
    "--repo",
    "-C",
    "repo_path",
    type=click.Path(path_type=Path),
    default=".",
    show_default=True,
    help="Repository directory to run in",
)
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Configuration file to use")
@click.option("--verbose", "-v", is_flag=True, help="Show the git commands being run")
@click.pass_context
def cli(ctx: click.Context, repo_path: Path, config_path: Optional[Path], verbose: bool) -> None:
    """mhgit - run git repository operations with typed results.

    \b
    Examples:
        mhgit -C ~/work/project init
        mhgit add && mhgit commit -m "Initial commit"
        mhgit status
    """
    path = config_path or get_config_path()
    try:
        config = load_or_default(path)
    except (ValidationError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration {path}: {e}")
        sys.exit(1)

    verbose = verbose or config.output.verbose
    console.verbose = verbose
    console.rich.no_color = not config.output.colored
    _setup_logging(verbose)

    ctx.obj = CliState(
        config=config,
        config_path=path,
        repo_path=repo_path,
        runner=SubprocessRunner.from_config(config),
    )


@cli.command()
@click.option("--bare", is_flag=True, help="Create a bare repository")
@click.option("--initial-branch", "-b", help="Name of the initial branch")
@pass_state
@handle_git_errors
def init(state: CliState, bare: bool, initial_branch: Optional[str]) -> None:
    """Create a git repository, creating the directory if needed."""
    repo = Repository.init_at(
        state.repo_path,
        runner=state.runner,
        bare=bare,
        initial_branch=initial_branch or state.config.init.initial_branch,
    )
    console.print_success(f"Initialized git repository in {repo.path}")


@cli.command()
@click.argument("url")
@click.argument("directory", required=False, type=click.Path(path_type=Path))
@click.option("--branch", "-b", help="Branch to check out")
@click.option("--origin", "-o", help="Name of the upstream remote")
@click.option("--depth", type=click.IntRange(min=1), help="Create a shallow clone with this many commits")
@click.option("--bare", is_flag=True, help="Make a bare repository")
@pass_state
@handle_git_errors
def clone(
    state: CliState,
    url: str,
    directory: Optional[Path],
    branch: Optional[str],
    origin: Optional[str],
    depth: Optional[int],
    bare: bool,
) -> None:
    """Clone URL into DIRECTORY (relative to --repo)."""
    options = CloneOptions(url=url, directory=directory, branch=branch, origin=origin, depth=depth, bare=bare)
    repo = options.run(cwd=state.repo_path, runner=state.runner)
    console.print_success(f"Cloned {url} into {repo.path}")


@cli.command()
@click.argument("pathspecs", nargs=-1)
@click.option("--all/--no-all", "-A", "all_", default=None, help="Add all changes (default when no paths given)")
@click.option("--chmod", type=click.Choice(["+x", "-x"]), help="Set or clear the executable bit")
@pass_state
@handle_git_errors
def add(state: CliState, pathspecs: tuple[str, ...], all_: Optional[bool], chmod: Optional[str]) -> None:
    """Stage PATHSPECS, or everything when none are given."""
    if not pathspecs and all_ is None:
        all_ = True
    options = AddOptions(
        all=all_,
        chmod=None if chmod is None else chmod == "+x",
        pathspecs=list(pathspecs),
    )
    options.run(state.repository())


@cli.command()
@click.argument("files", nargs=-1)
@click.option("--message", "-m", help="Commit message")
@click.option("--all", "-a", "all_", is_flag=True, help="Stage modified and deleted files first")
@click.option("--allow-empty", is_flag=True, help="Allow a commit without changes")
@click.option("--amend", is_flag=True, help="Replace the tip of the current branch")
@click.option("--no-edit", is_flag=True, help="Keep the previous message when amending")
@click.option("--author", help="Override the author, 'Name <email>'")
@pass_state
@handle_git_errors
def commit(
    state: CliState,
    files: tuple[str, ...],
    message: Optional[str],
    all_: bool,
    allow_empty: bool,
    amend: bool,
    no_edit: bool,
    author: Optional[str],
) -> None:
    """Record staged changes (or only FILES) in a new commit."""
    options = CommitOptions(
        message=message,
        all=all_,
        allow_empty=allow_empty,
        amend=amend,
        no_edit=no_edit,
        author=author,
        files=list(files),
    )
    options.run(state.repository())
    console.print_success("Committed")


@cli.command()
@click.argument("remote", required=False)
@click.argument("refspecs", nargs=-1)
@click.option("--all", "all_", is_flag=True, help="Push all branches")
@click.option("--tags", is_flag=True, help="Push all tags")
@click.option("--force", "-f", is_flag=True, help="Overwrite remote refs")
@click.option("--set-upstream", "-u", is_flag=True, help="Record the upstream of pushed branches")
@pass_state
@handle_git_errors
def push(
    state: CliState,
    remote: Optional[str],
    refspecs: tuple[str, ...],
    all_: bool,
    tags: bool,
    force: bool,
    set_upstream: bool,
) -> None:
    """Push to REMOTE (default: the upstream of the current branch)."""
    options = PushOptions(
        remote=remote,
        refspecs=list(refspecs),
        all=all_,
        tags=tags,
        force=force,
        set_upstream=set_upstream,
    )
    options.run(state.repository())
    console.print_success("Pushed")


@cli.command()
@click.argument("remote", required=False)
@click.argument("refspecs", nargs=-1)
@click.option("--rebase/--no-rebase", default=None, help="Rebase instead of merging")
@click.option("--ff-only", is_flag=True, help="Refuse anything but a fast-forward")
@click.option("--allow-unrelated-histories", is_flag=True, help="Merge histories without a common base")
@pass_state
@handle_git_errors
def pull(
    state: CliState,
    remote: Optional[str],
    refspecs: tuple[str, ...],
    rebase: Optional[bool],
    ff_only: bool,
    allow_unrelated_histories: bool,
) -> None:
    """Fetch from REMOTE and integrate the changes."""
    options = PullOptions(
        remote=remote,
        refspecs=list(refspecs),
        rebase=rebase,
        ff_only=ff_only,
        allow_unrelated_histories=allow_unrelated_histories,
    )
    options.run(state.repository())
    console.print_success("Pulled")


@cli.command()
@click.argument("remote", required=False)
@click.argument("refspecs", nargs=-1)
@click.option("--all", "all_", is_flag=True, help="Fetch all remotes")
@click.option("--prune", "-p", is_flag=True, help="Remove deleted remote-tracking refs")
@click.option("--tags", "-t", is_flag=True, help="Fetch all tags")
@pass_state
@handle_git_errors
def fetch(
    state: CliState,
    remote: Optional[str],
    refspecs: tuple[str, ...],
    all_: bool,
    prune: bool,
    tags: bool,
) -> None:
    """Download objects and refs from REMOTE."""
    FetchOptions(remote=remote, refspecs=list(refspecs), all=all_, prune=prune, tags=tags).run(state.repository())


@cli.command()
@click.argument("pathspecs", nargs=-1)
@click.option("--ignored", is_flag=True, help="Show ignored files")
@click.option("--show-stash", is_flag=True, help="Show the number of stash entries")
@pass_state
@handle_git_errors
def status(state: CliState, pathspecs: tuple[str, ...], ignored: bool, show_stash: bool) -> None:
    """Show the working tree status.

    \b
    Examples:
        mhgit status
        mhgit status --ignored src/
    """
    options = StatusOptions(ignored=ignored, show_stash=show_stash, pathspecs=list(pathspecs))
    result = options.run(state.repository())
    console.print_status(result, show_ignored=ignored)


@cli.command()
@click.argument("name")
@click.argument("target", required=False)
@click.option("--message", "-m", help="Annotation message (makes an annotated tag)")
@click.option("--force", "-f", is_flag=True, help="Replace an existing tag")
@click.option("--delete", "-d", is_flag=True, help="Delete the tag instead")
@pass_state
@handle_git_errors
def tag(
    state: CliState,
    name: str,
    target: Optional[str],
    message: Optional[str],
    force: bool,
    delete: bool,
) -> None:
    """Create (or delete) the tag NAME on TARGET (default: HEAD)."""
    if delete:
        TagOptions.delete(name).run(state.repository())
        console.print_success(f"Deleted tag {name}")
        return
    TagOptions.create(name, target, message=message, force=force).run(state.repository())
    console.print_success(f"Tagged {target or 'HEAD'} as {name}")


# Remote


@cli.group()
def remote() -> None:
    """Manage the set of tracked repositories."""
    pass


@remote.command("add")
@click.argument("name")
@click.argument("url")
@click.option("--track", "-t", multiple=True, help="Branch to track (repeatable)")
@click.option("--master", "-m", help="Branch the remote HEAD points to")
@click.option("--tags/--no-tags", default=None, help="Import every tag from the remote")
@pass_state
@handle_git_errors
def remote_add(
    state: CliState,
    name: str,
    url: str,
    track: tuple[str, ...],
    master: Optional[str],
    tags: Optional[bool],
) -> None:
    """Add the remote NAME for URL."""
    RemoteOptions.add(name, url, track=list(track), master=master, tags=tags).run(state.repository())
    console.print_success(f"Added remote {name}")


@remote.command("remove")
@click.argument("name")
@pass_state
@handle_git_errors
def remote_remove(state: CliState, name: str) -> None:
    """Remove the remote NAME."""
    RemoteOptions.remove(name).run(state.repository())
    console.print_success(f"Removed remote {name}")


@remote.command("rename")
@click.argument("old")
@click.argument("new")
@pass_state
@handle_git_errors
def remote_rename(state: CliState, old: str, new: str) -> None:
    """Rename the remote OLD to NEW."""
    RemoteOptions.rename(old, new).run(state.repository())
    console.print_success(f"Renamed remote {old} to {new}")


@remote.command("set-url")
@click.argument("name")
@click.argument("url")
@pass_state
@handle_git_errors
def remote_set_url(state: CliState, name: str, url: str) -> None:
    """Change the URL of the remote NAME."""
    RemoteOptions.set_url(name, url).run(state.repository())
    console.print_success(f"Updated remote {name}")


# Stash


@cli.group(invoke_without_command=True)
@click.option("--message", "-m", help="Stash description (push)")
@click.option("--include-untracked", "-u", is_flag=True, help="Stash untracked files too (push)")
@click.option("--keep-index", "-k", is_flag=True, help="Leave staged changes in place (push)")
@click.pass_context
def stash(ctx: click.Context, message: Optional[str], include_untracked: bool, keep_index: bool) -> None:
    """Stash local changes (push when no subcommand is given).

    The options apply to the implicit push; paths need 'stash push'.

    \b
    Examples:
        mhgit stash -m "wip"
        mhgit stash push -m "wip" src/
        mhgit stash pop
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(stash_push, message=message, include_untracked=include_untracked, keep_index=keep_index)
    elif message is not None or include_untracked or keep_index:
        raise click.UsageError("stash options must follow 'stash push'", ctx=ctx)


@stash.command("push")
@click.argument("pathspecs", nargs=-1)
@click.option("--message", "-m", help="Stash description")
@click.option("--include-untracked", "-u", is_flag=True, help="Stash untracked files too")
@click.option("--keep-index", "-k", is_flag=True, help="Leave staged changes in place")
@pass_state
@handle_git_errors
def stash_push(
    state: CliState,
    pathspecs: tuple[str, ...] = (),
    message: Optional[str] = None,
    include_untracked: bool = False,
    keep_index: bool = False,
) -> None:
    """Save local changes and revert the working tree."""
    StashOptions(
        action=StashAction.PUSH,
        message=message,
        include_untracked=include_untracked,
        keep_index=keep_index,
        pathspecs=list(pathspecs),
    ).run(state.repository())
    console.print_success("Stashed local changes")


def _stash_restore(action: StashAction) -> Callable:
    @click.argument("ref", required=False)
    @click.option("--index", is_flag=True, help="Restore the index as well")
    @pass_state
    @handle_git_errors
    def command(state: CliState, ref: Optional[str], index: bool) -> None:
        StashOptions(action=action, ref=ref, index=index).run(state.repository())
        console.print_success(f"Stash {action.value} done")

    return command


stash.command("pop", help="Apply a stash entry and remove it.")(_stash_restore(StashAction.POP))
stash.command("apply", help="Apply a stash entry and keep it.")(_stash_restore(StashAction.APPLY))


@stash.command("drop")
@click.argument("ref", required=False)
@pass_state
@handle_git_errors
def stash_drop(state: CliState, ref: Optional[str]) -> None:
    """Remove a stash entry (default: the latest)."""
    StashOptions(action=StashAction.DROP, ref=ref).run(state.repository())
    console.print_success("Dropped stash entry")


@stash.command("clear")
@pass_state
@handle_git_errors
def stash_clear(state: CliState) -> None:
    """Remove all stash entries."""
    StashOptions(action=StashAction.CLEAR).run(state.repository())
    console.print_success("Cleared stash")


# Notes


@cli.group()
def notes() -> None:
    """Add or inspect object notes."""
    pass


@notes.command("add")
@click.argument("message")
@click.argument("target", required=False)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing note")
@pass_state
@handle_git_errors
def notes_add(state: CliState, message: str, target: Optional[str], force: bool) -> None:
    """Attach MESSAGE as a note to TARGET (default: HEAD)."""
    NotesOptions.add(message, target, force=force).run(state.repository())
    console.print_success(f"Added note to {target or 'HEAD'}")


@notes.command("append")
@click.argument("message")
@click.argument("target", required=False)
@pass_state
@handle_git_errors
def notes_append(state: CliState, message: str, target: Optional[str]) -> None:
    """Append MESSAGE to the note of TARGET (default: HEAD)."""
    NotesOptions.append(message, target).run(state.repository())
    console.print_success(f"Appended note to {target or 'HEAD'}")


@notes.command("remove")
@click.argument("target", required=False)
@pass_state
@handle_git_errors
def notes_remove(state: CliState, target: Optional[str]) -> None:
    """Remove the note of TARGET (default: HEAD)."""
    NotesOptions.remove(target).run(state.repository())
    console.print_success(f"Removed note from {target or 'HEAD'}")


# Configuration


@cli.group()
def config() -> None:
    """Manage the mhgit configuration file."""
    pass


@config.command("init")
@pass_state
def config_init(state: CliState) -> None:
    """Write a default configuration file if none exists."""
    path, created = ensure_config_exists(state.config_path)
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_info(f"Configuration already exists: {path}")


@config.command("show")
@pass_state
def config_show(state: CliState) -> None:
    """Show the effective configuration."""
    console.print_config_summary(str(state.config_path), state.config)


@config.command("check")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@pass_state
def config_check(state: CliState, file: Optional[Path]) -> None:
    """Validate FILE (default: the active configuration file)."""
    is_valid, errors = validate_config_file(file or state.config_path)
    if is_valid:
        console.print_success("Configuration is valid")
        return
    for error in errors:
        console.print_error(error)
    sys.exit(1)


if __name__ == "__main__":
    cli()
