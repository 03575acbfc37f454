"""Prompt segment contract and provider wiring.

Every segment kind (status, jobs, path, git) implements :class:`PromptSegment`.
The layout engine and compositor only ever talk to that protocol.
Providers receive a read-only :class:`Context` and return a segment, or
``None`` when their preconditions are not met.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from ..colors import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Context:
    """Snapshot of the invoking shell's state for one prompt render."""

    path: Path | None = None
    pipestatus: str | None = None
    jobs: int = 0
    git_timeout_seconds: float = 1.0


class ShrinkPriority(enum.IntEnum):
    """How hard a segment is being squeezed, from least to most severe."""

    UNCONSTRAINED = 0
    SHRINK_COMFORTABLE = 1
    SHRINK_BEYOND_MIN = 2


@dataclass(frozen=True)
class RenderedSegment:
    text: str
    fg_color: Color
    bg_color: Color


class PromptSegment(Protocol):
    def base_width(self, shrink: ShrinkPriority) -> int:
        """Return the width this segment wants at ``shrink`` severity."""
        ...

    def actual_width_under(self, max_size: int) -> int:
        """Return the width the segment snaps to when capped at ``max_size``."""
        ...

    def render(self, max_size: int) -> RenderedSegment:
        """Render text exactly ``actual_width_under(max_size)`` clusters wide."""
        ...


SegmentProvider = Callable[[Context], Optional[PromptSegment]]


def default_providers() -> tuple[SegmentProvider, ...]:
    """Return segment providers in prompt order, left to right."""
    from .git import GitSegment
    from .jobs import JobsSegment
    from .path import PathSegment
    from .status import StatusSegment

    return (
        StatusSegment.from_context,
        JobsSegment.from_context,
        PathSegment.from_context,
        GitSegment.from_context,
    )


def build_segments(
    context: Context,
    providers: tuple[SegmentProvider, ...] | None = None,
) -> list[PromptSegment]:
    """Run every provider and keep the segments that are present."""
    if providers is None:
        providers = default_providers()
    segments: list[PromptSegment] = []
    for provider in providers:
        segment = provider(context)
        if segment is None:
            continue
        segments.append(segment)
    logger.debug("built %d prompt segments", len(segments))
    return segments


__all__ = [
    "Context",
    "ShrinkPriority",
    "RenderedSegment",
    "PromptSegment",
    "SegmentProvider",
    "build_segments",
    "default_providers",
]
