"""Fit prompt segments into a terminal of known width.

Segments start at their preferred widths. If the prompt leaves too little
room to type, segments are squeezed greedily: first down to their
comfortable sizes, then down to their floors, always shrinking whichever
segment currently has the most slack.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .segments import PromptSegment, ShrinkPriority

logger = logging.getLogger(__name__)

MIN_HEADROOM = 40
SHRINK_TIERS: tuple[ShrinkPriority, ...] = (
    ShrinkPriority.SHRINK_COMFORTABLE,
    ShrinkPriority.SHRINK_BEYOND_MIN,
)


class Line(enum.Enum):
    SINGLE_LINE = "single"
    SPLIT_LINE = "split"
    OVERFLOW_LINE = "overflow"


@dataclass
class SegmentLayout:
    segment: PromptSegment
    current_size: int


def prompt_width(layout: Sequence[SegmentLayout]) -> int:
    """Return total columns used: every segment plus its separator, plus one."""
    return sum(entry.current_size + 1 for entry in layout) + 1


def amount_can_shrink(entry: SegmentLayout, shrink: ShrinkPriority) -> int:
    return max(0, entry.current_size - entry.segment.base_width(shrink))


def _most_shrinkable(layout: list[SegmentLayout], shrink: ShrinkPriority) -> tuple[int, int]:
    """Return ``(index, slack)`` of the entry with the most slack; ties go to the earliest."""
    best_index = 0
    best_slack = -1
    for index, entry in enumerate(layout):
        slack = amount_can_shrink(entry, shrink)
        if slack > best_slack:
            best_index = index
            best_slack = slack
    return best_index, best_slack


def layout_segments(
    segments: Sequence[PromptSegment],
    term_width: int | None,
    min_headroom: int = MIN_HEADROOM,
) -> tuple[Line, list[SegmentLayout]]:
    """Decide the line classification and per-segment widths.

    ``term_width`` of ``None`` means the width is unknown and treated as
    unbounded. A prompt is single-line only when strictly more than
    ``min_headroom`` columns are left over.
    """
    layout = [
        SegmentLayout(segment=segment, current_size=segment.base_width(ShrinkPriority.UNCONSTRAINED))
        for segment in segments
    ]
    width = prompt_width(layout)

    if term_width is None or term_width - width > min_headroom:
        logger.debug("layout single line: width=%d term_width=%s", width, term_width)
        return Line.SINGLE_LINE, layout

    for shrink in SHRINK_TIERS:
        while width > term_width:
            index, slack = _most_shrinkable(layout, shrink)
            if slack <= 0:
                break
            entry = layout[index]
            requested = entry.current_size - min(width - term_width, slack)
            actual = entry.segment.actual_width_under(requested)
            if actual >= entry.current_size:
                # A segment that cannot snap below its current size ends this tier.
                break
            entry.current_size = actual
            width = prompt_width(layout)

    sizes = [entry.current_size for entry in layout]
    if width > term_width:
        logger.debug("layout overflow: width=%d term_width=%d sizes=%s", width, term_width, sizes)
        return Line.OVERFLOW_LINE, layout

    logger.debug("layout split line: width=%d term_width=%d sizes=%s", width, term_width, sizes)
    return Line.SPLIT_LINE, layout
