"""Exit-status segment: one check/cross mark per pipeline stage."""

from __future__ import annotations

import logging

from .. import colors
from . import Context, RenderedSegment, ShrinkPriority

logger = logging.getLogger(__name__)

SUCCESS_SYMBOL = f"{colors.foreground(colors.GREEN)}✓"
FAILURE_SYMBOL = f"{colors.foreground(colors.RED)}✘"
COLLAPSED_WIDTH = 3


def parse_pipestatus(pipestatus: str) -> list[bool]:
    """Split a whitespace-separated status string into per-stage success flags."""
    return [token == "0" for token in pipestatus.split()]


class StatusSegment:
    def __init__(self, statuses: list[bool]) -> None:
        self.statuses = list(statuses)

    @classmethod
    def from_context(cls, context: Context) -> StatusSegment | None:
        """Build the segment only when some stage of the last pipeline failed."""
        if context.pipestatus is None:
            return None
        statuses = parse_pipestatus(context.pipestatus)
        if all(statuses):
            logger.debug("status segment absent: no failing exit status in %r", context.pipestatus)
            return None
        return cls(statuses)

    def _full_width(self) -> int:
        return len(self.statuses) * 2 + 1

    def base_width(self, shrink: ShrinkPriority) -> int:
        if shrink == ShrinkPriority.UNCONSTRAINED:
            return self._full_width()
        if shrink == ShrinkPriority.SHRINK_COMFORTABLE:
            return COLLAPSED_WIDTH
        return 0

    def actual_width_under(self, max_size: int) -> int:
        if max_size >= self._full_width():
            return self._full_width()
        if max_size >= COLLAPSED_WIDTH:
            return COLLAPSED_WIDTH
        return 0

    def render(self, max_size: int) -> RenderedSegment:
        if max_size >= self._full_width():
            symbols = " ".join(SUCCESS_SYMBOL if ok else FAILURE_SYMBOL for ok in self.statuses)
            text = f" {symbols} "
        elif max_size >= COLLAPSED_WIDTH:
            # Collapsed form always reports the failure.
            text = f" {FAILURE_SYMBOL} "
        else:
            text = ""
        return RenderedSegment(text=text, fg_color=colors.BLACK, bg_color=colors.BLACK)
