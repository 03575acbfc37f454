"""Background-job segment: a gear, prefixed by the count when above one."""

from __future__ import annotations

from .. import colors
from . import Context, RenderedSegment, ShrinkPriority

JOB_SYMBOL = "⚙"
COLLAPSED_WIDTH = 3


class JobsSegment:
    def __init__(self, jobs: int) -> None:
        self.jobs = jobs

    @classmethod
    def from_context(cls, context: Context) -> JobsSegment | None:
        if context.jobs <= 0:
            return None
        return cls(context.jobs)

    def _full_width(self) -> int:
        if self.jobs == 1:
            return COLLAPSED_WIDTH
        return len(str(self.jobs)) + 4

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
        if max_size >= self._full_width() and self.jobs > 1:
            text = f" {self.jobs} {JOB_SYMBOL} "
        elif max_size >= COLLAPSED_WIDTH:
            text = f" {JOB_SYMBOL} "
        else:
            text = ""
        return RenderedSegment(text=text, fg_color=colors.YELLOW, bg_color=colors.BLACK)
