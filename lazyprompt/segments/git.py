"""Version-control segment: branch name plus change markers.

Degrades in steps as space runs out: full branch, ellipsized branch,
branch glyph with change markers, bare branch glyph, nothing.
"""

from __future__ import annotations

import logging

from .. import colors
from ..ansi import grapheme_len, sanitize_terminal_text, take_graphemes
from ..git_status import RepoState, RepoStatus, collect_repo_info
from . import Context, RenderedSegment, ShrinkPriority

logger = logging.getLogger(__name__)

BRANCH_SYMBOL = "\ue0a0"
ELLIPSIS = "..."
MIN_BRANCH_TEXT = 4
SYMBOL_ONLY_WIDTH = 3


class GitSegment:
    def __init__(self, branch_name: str, status: RepoStatus) -> None:
        self.branch_name = sanitize_terminal_text(branch_name)
        self.branch_name_len = grapheme_len(self.branch_name)
        self.status = status
        self.status_symbols = status.changes.symbols() if status.state == RepoState.CHANGES else ""
        self.status_len = len(self.status_symbols)

    @classmethod
    def from_context(cls, context: Context) -> GitSegment | None:
        if context.path is None:
            return None
        info = collect_repo_info(context.path, context.git_timeout_seconds)
        if info is None:
            logger.debug("git segment absent: %s is not inside a work tree", context.path)
            return None
        return cls(info.branch, info.status)

    def _status_width(self) -> int:
        return self.status_len + 1 if self.status_len else 0

    def _full_width(self) -> int:
        return self.branch_name_len + 4 + self._status_width()

    def _min_width_with_branch(self) -> int:
        return min(self.branch_name_len, MIN_BRANCH_TEXT + len(ELLIPSIS)) + 4 + self._status_width()

    def _status_suffix(self) -> str:
        return f" {self.status_symbols}" if self.status_symbols else ""

    def base_width(self, shrink: ShrinkPriority) -> int:
        if shrink == ShrinkPriority.UNCONSTRAINED:
            return self._full_width()
        if shrink == ShrinkPriority.SHRINK_COMFORTABLE:
            return self._min_width_with_branch()
        return 0

    def actual_width_under(self, max_size: int) -> int:
        if max_size >= self._min_width_with_branch():
            return min(max_size, self._full_width())
        if self.status_len and max_size >= self.status_len + 4:
            return self.status_len + 4
        if max_size >= SYMBOL_ONLY_WIDTH:
            return SYMBOL_ONLY_WIDTH
        return 0

    def render(self, max_size: int) -> RenderedSegment:
        if max_size >= self._full_width():
            text = f" {BRANCH_SYMBOL} {self.branch_name}{self._status_suffix()} "
        elif max_size >= self._min_width_with_branch():
            # Prefix, ellipsis and trailing space take seven columns.
            keep = max_size - (3 + len(ELLIPSIS) + 1) - self._status_width()
            branch = take_graphemes(self.branch_name, keep)
            text = f" {BRANCH_SYMBOL} {branch}{ELLIPSIS}{self._status_suffix()} "
        elif self.status_len and max_size >= self.status_len + 4:
            text = f" {BRANCH_SYMBOL}{self._status_suffix()} "
        elif max_size >= SYMBOL_ONLY_WIDTH:
            text = f" {BRANCH_SYMBOL} "
        else:
            text = ""
        bg = colors.GREEN if self.status.state == RepoState.CLEAN else colors.YELLOW
        return RenderedSegment(text=text, fg_color=colors.BLACK, bg_color=bg)


__all__ = ["GitSegment"]
