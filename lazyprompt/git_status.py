"""Git repository discovery for the prompt's version-control segment.

Resolves the work tree, current branch (or detached commit), and a
summary of staged/unstaged/conflicted changes from porcelain status.
Every git failure is treated as "not a repository".
"""

from __future__ import annotations

import enum
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NO_HEAD = "<NO HEAD>"
_CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})
_STAGED_CODES = frozenset("MADRTC")
_UNSTAGED_CODES = frozenset("MDTR")


class RepoState(enum.Enum):
    CLEAN = "clean"
    UNTRACKED = "untracked"
    CHANGES = "changes"


@dataclass(frozen=True)
class FileChanges:
    staged: bool = False
    unstaged: bool = False
    conflicted: bool = False

    def symbols(self) -> str:
        """Return ``+`` for staged, ``*`` for unstaged, ``!`` for conflicted."""
        out: list[str] = []
        if self.staged:
            out.append("+")
        if self.unstaged:
            out.append("*")
        if self.conflicted:
            out.append("!")
        return "".join(out)


@dataclass(frozen=True)
class RepoStatus:
    state: RepoState
    changes: FileChanges = FileChanges()


@dataclass(frozen=True)
class RepoInfo:
    root: Path
    branch: str
    status: RepoStatus


def _run_git(cwd: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", " ".join(args), cwd, exc)
        return None


def _git_stdout(cwd: Path, args: list[str], timeout_seconds: float) -> str | None:
    proc = _run_git(cwd, args, timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    return proc.stdout.strip()


def resolve_repo_root(path: Path, timeout_seconds: float) -> Path | None:
    """Return the work-tree root containing ``path``, if any."""
    output = _git_stdout(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if not output:
        return None
    return Path(output)


def resolve_branch_name(repo_root: Path, timeout_seconds: float) -> str:
    """Return the checked-out branch, the short commit id when detached, or ``<NO HEAD>``.

    ``symbolic-ref`` also names unborn branches in freshly initialized repos.
    """
    branch = _git_stdout(repo_root, ["symbolic-ref", "--short", "-q", "HEAD"], timeout_seconds)
    if branch:
        return branch
    short_id = _git_stdout(repo_root, ["rev-parse", "--short", "HEAD"], timeout_seconds)
    if short_id:
        return short_id
    return NO_HEAD


def _iter_porcelain_codes(output: str) -> list[str]:
    codes: list[str] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        codes.append(status)

        # Renamed/copied entries carry the source path as an extra token.
        if "R" in status or "C" in status:
            index += 1

    return codes


def parse_porcelain_status(output: str) -> RepoStatus:
    """Summarize ``git status --porcelain=v1 -z`` output."""
    staged = False
    unstaged = False
    conflicted = False
    untracked = False
    for status in _iter_porcelain_codes(output):
        if status == "!!":
            continue
        if status == "??":
            untracked = True
            continue
        if status in _CONFLICT_CODES:
            conflicted = True
            continue
        index_code, worktree_code = status[0], status[1]
        if index_code in _STAGED_CODES:
            staged = True
        if worktree_code in _UNSTAGED_CODES:
            unstaged = True

    if staged or unstaged or conflicted:
        return RepoStatus(RepoState.CHANGES, FileChanges(staged, unstaged, conflicted))
    if untracked:
        return RepoStatus(RepoState.UNTRACKED)
    return RepoStatus(RepoState.CLEAN)


def collect_repo_info(path: Path, timeout_seconds: float = 1.0) -> RepoInfo | None:
    """Gather branch and change summary for the repository at ``path``."""
    repo_root = resolve_repo_root(path, timeout_seconds)
    if repo_root is None:
        return None

    status_proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        timeout_seconds,
    )
    if status_proc is None or status_proc.returncode != 0:
        return None

    return RepoInfo(
        root=repo_root,
        branch=resolve_branch_name(repo_root, timeout_seconds),
        status=parse_porcelain_status(status_proc.stdout),
    )
