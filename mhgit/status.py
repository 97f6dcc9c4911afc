"""Status types returned from git status.

Parses the NUL-terminated porcelain v2 format produced by
``git status --porcelain=v2 -z --branch``. Every record starts with a
one-character tag:

    # <header> <value>            branch and stash headers
    1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
    2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <X><score> <path>\\0<origPath>
    u <XY> <sub> <m1> <m2> <m3> <mW> <h1> <h2> <h3> <path>
    ? <path>
    ! <path>
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from mhgit.errors import OutputParseError

_COMMAND = "status"

# Index / work tree state letters: unmodified, modified, type changed,
# added, deleted, renamed, copied, updated but unmerged
_STATE_LETTERS = frozenset(".MTADRCU")
_MODE = re.compile(r"^[0-7]{6}$")
_OBJECT_NAME = re.compile(r"^[0-9a-f]{4,64}$")
_SUBMODULE = re.compile(r"^(N\.\.\.|S[C.][M.][U.])$")
_SCORE = re.compile(r"^([RC])(\d{1,3})$")
_AHEAD_BEHIND = re.compile(r"^\+(\d+) -(\d+)$")

INITIAL_OID = "(initial)"
DETACHED_HEAD = "(detached)"


class EntryKind(str, Enum):
    """Record type of a status entry."""

    CHANGED = "1"
    RENAMED = "2"
    UNMERGED = "u"
    UNTRACKED = "?"
    IGNORED = "!"


@dataclass(frozen=True)
class SubmoduleState:
    """Submodule flags of an entry (the <sub> field)."""

    is_submodule: bool = False
    commit_changed: bool = False
    tracked_changes: bool = False
    untracked_changes: bool = False

    @classmethod
    def parse(cls, value: str) -> SubmoduleState:
        return cls(
            is_submodule=value[0] == "S",
            commit_changed=value[1] == "C",
            tracked_changes=value[2] == "M",
            untracked_changes=value[3] == "U",
        )


@dataclass(frozen=True)
class Stage:
    """File mode and object name of one stage of an unmerged entry."""

    mode: str
    object_name: str


@dataclass(frozen=True)
class StatusEntry:
    """One path reported by git status."""

    kind: EntryKind
    path: str
    index_status: str = "."
    worktree_status: str = "."
    submodule: SubmoduleState = field(default_factory=SubmoduleState)
    mode_head: str = ""
    mode_index: str = ""
    mode_worktree: str = ""
    object_head: str = ""
    object_index: str = ""
    # Renamed/copied entries only
    rename_kind: str = ""
    score: int = 0
    orig_path: str = ""
    # Unmerged entries only: stages 1 (base), 2 (ours), 3 (theirs)
    stages: tuple[Stage, ...] = ()

    @property
    def status(self) -> str:
        """Two-letter XY code, index state first."""
        return self.index_status + self.worktree_status

    @property
    def is_renamed(self) -> bool:
        return self.kind == EntryKind.RENAMED and self.rename_kind == "R"

    @property
    def is_copied(self) -> bool:
        return self.kind == EntryKind.RENAMED and self.rename_kind == "C"

    @property
    def is_staged(self) -> bool:
        return self.kind in (EntryKind.CHANGED, EntryKind.RENAMED) and self.index_status != "."

    @property
    def is_unstaged(self) -> bool:
        return self.kind in (EntryKind.CHANGED, EntryKind.RENAMED) and self.worktree_status != "."


@dataclass
class Status:
    """Parsed output of git status."""

    branch_oid: str = ""
    branch_head: str = ""
    upstream: Optional[str] = None
    ahead: Optional[int] = None
    behind: Optional[int] = None
    stash_count: int = 0
    entries: list[StatusEntry] = field(default_factory=list)

    def _of_kind(self, kind: EntryKind) -> list[StatusEntry]:
        return [entry for entry in self.entries if entry.kind == kind]

    @property
    def changed(self) -> list[StatusEntry]:
        return self._of_kind(EntryKind.CHANGED)

    @property
    def renamed(self) -> list[StatusEntry]:
        return self._of_kind(EntryKind.RENAMED)

    @property
    def unmerged(self) -> list[StatusEntry]:
        return self._of_kind(EntryKind.UNMERGED)

    @property
    def untracked(self) -> list[str]:
        return [entry.path for entry in self._of_kind(EntryKind.UNTRACKED)]

    @property
    def ignored(self) -> list[str]:
        return [entry.path for entry in self._of_kind(EntryKind.IGNORED)]

    @property
    def is_clean(self) -> bool:
        """True when nothing is staged, modified, unmerged or untracked."""
        return all(entry.kind == EntryKind.IGNORED for entry in self.entries)

    @property
    def is_initial(self) -> bool:
        """True before the first commit."""
        return self.branch_oid == INITIAL_OID

    @property
    def is_detached(self) -> bool:
        return self.branch_head == DETACHED_HEAD


def parse_status(text: str) -> Status:
    """
    Parse ``git status --porcelain=v2 -z`` output.

    Args:
        text: Raw stdout of git status.

    Returns:
        Status with headers and entries in the order git printed them.

    Raises:
        OutputParseError: If a record does not match the porcelain v2 format.
    """
    status = Status()
    records = _records(text)

    for record in records:
        tag = record[0]
        if tag == "#":
            _parse_header(status, record)
        elif tag == EntryKind.CHANGED.value:
            status.entries.append(_parse_changed(record))
        elif tag == EntryKind.RENAMED.value:
            orig_path = next(records, None)
            if orig_path is None:
                raise OutputParseError(_COMMAND, record, "renamed entry without original path")
            status.entries.append(_parse_renamed(record, orig_path))
        elif tag == EntryKind.UNMERGED.value:
            status.entries.append(_parse_unmerged(record))
        elif tag in (EntryKind.UNTRACKED.value, EntryKind.IGNORED.value):
            status.entries.append(_parse_path_only(record))
        else:
            raise OutputParseError(_COMMAND, record, "unknown record type")

    return status


def _records(text: str) -> Iterator[str]:
    for record in text.split("\0"):
        if record:
            yield record


def _parse_header(status: Status, record: str) -> None:
    if not record.startswith("# "):
        raise OutputParseError(_COMMAND, record, "malformed header")
    key, _, value = record[2:].partition(" ")
    if not value:
        raise OutputParseError(_COMMAND, record, "header without value")

    if key == "branch.oid":
        status.branch_oid = value
    elif key == "branch.head":
        status.branch_head = value
    elif key == "branch.upstream":
        status.upstream = value
    elif key == "branch.ab":
        match = _AHEAD_BEHIND.match(value)
        if not match:
            raise OutputParseError(_COMMAND, record, "bad ahead/behind counts")
        status.ahead, status.behind = int(match.group(1)), int(match.group(2))
    elif key == "stash":
        if not value.isdigit():
            raise OutputParseError(_COMMAND, record, "bad stash count")
        status.stash_count = int(value)
    # git documents that further headers may be added; they are skipped


def _split(record: str, count: int, what: str) -> list[str]:
    """Split a record into exactly `count` fields, the last being the path."""
    fields = record.split(" ", count - 1)
    if len(fields) != count or not fields[-1]:
        raise OutputParseError(_COMMAND, record, f"expected {count} fields in {what} entry")
    return fields


def _check_xy(record: str, xy: str) -> None:
    if len(xy) != 2 or not set(xy) <= _STATE_LETTERS:
        raise OutputParseError(_COMMAND, record, f"bad state code {xy!r}")


def _check_submodule(record: str, sub: str) -> SubmoduleState:
    if not _SUBMODULE.match(sub):
        raise OutputParseError(_COMMAND, record, f"bad submodule state {sub!r}")
    return SubmoduleState.parse(sub)


def _check_modes(record: str, *modes: str) -> None:
    for mode in modes:
        if not _MODE.match(mode):
            raise OutputParseError(_COMMAND, record, f"bad file mode {mode!r}")


def _check_object_names(record: str, *names: str) -> None:
    for name in names:
        if not _OBJECT_NAME.match(name):
            raise OutputParseError(_COMMAND, record, f"bad object name {name!r}")


def _parse_changed(record: str) -> StatusEntry:
    _, xy, sub, m_head, m_index, m_worktree, h_head, h_index, path = _split(record, 9, "changed")
    _check_xy(record, xy)
    submodule = _check_submodule(record, sub)
    _check_modes(record, m_head, m_index, m_worktree)
    _check_object_names(record, h_head, h_index)
    return StatusEntry(
        kind=EntryKind.CHANGED,
        path=path,
        index_status=xy[0],
        worktree_status=xy[1],
        submodule=submodule,
        mode_head=m_head,
        mode_index=m_index,
        mode_worktree=m_worktree,
        object_head=h_head,
        object_index=h_index,
    )


def _parse_renamed(record: str, orig_path: str) -> StatusEntry:
    _, xy, sub, m_head, m_index, m_worktree, h_head, h_index, score, path = _split(record, 10, "renamed")
    _check_xy(record, xy)
    submodule = _check_submodule(record, sub)
    _check_modes(record, m_head, m_index, m_worktree)
    _check_object_names(record, h_head, h_index)
    match = _SCORE.match(score)
    if not match or int(match.group(2)) > 100:
        raise OutputParseError(_COMMAND, record, f"bad rename score {score!r}")
    return StatusEntry(
        kind=EntryKind.RENAMED,
        path=path,
        index_status=xy[0],
        worktree_status=xy[1],
        submodule=submodule,
        mode_head=m_head,
        mode_index=m_index,
        mode_worktree=m_worktree,
        object_head=h_head,
        object_index=h_index,
        rename_kind=match.group(1),
        score=int(match.group(2)),
        orig_path=orig_path,
    )


def _parse_unmerged(record: str) -> StatusEntry:
    fields = _split(record, 11, "unmerged")
    _, xy, sub, m1, m2, m3, m_worktree, h1, h2, h3, path = fields
    _check_xy(record, xy)
    submodule = _check_submodule(record, sub)
    _check_modes(record, m1, m2, m3, m_worktree)
    _check_object_names(record, h1, h2, h3)
    return StatusEntry(
        kind=EntryKind.UNMERGED,
        path=path,
        index_status=xy[0],
        worktree_status=xy[1],
        submodule=submodule,
        mode_worktree=m_worktree,
        stages=(Stage(m1, h1), Stage(m2, h2), Stage(m3, h3)),
    )


def _parse_path_only(record: str) -> StatusEntry:
    if len(record) < 3 or record[1] != " ":
        raise OutputParseError(_COMMAND, record, "expected '<tag> <path>'")
    return StatusEntry(kind=EntryKind(record[0]), path=record[2:])
