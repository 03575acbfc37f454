"""Compose laid-out segments into the final escape-coded prompt string.

Adjacent segments are chained with a powerline arrow whose foreground is
the current segment's background and whose background is the next one's,
so the colors flow into each other.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import colors
from .ansi import strip_ansi
from .layout import Line, SegmentLayout
from .segments import RenderedSegment

SEGMENT_SEPARATOR = "\ue0b0"
CONTINUATION_MARKER = " ↳ "


def render_overflow(*, no_color: bool = False) -> str:
    """Return the lone arrow shown when nothing fits."""
    return (
        f"{colors.sgr(colors.DEFAULT, colors.BLUE, no_color=no_color)}"
        f"{SEGMENT_SEPARATOR}"
        f"{colors.reset(no_color=no_color)}"
    )


def render_segments(rendered: Sequence[RenderedSegment], *, no_color: bool = False) -> str:
    out: list[str] = []
    for index, segment in enumerate(rendered):
        next_bg = rendered[index + 1].bg_color if index + 1 < len(rendered) else colors.DEFAULT
        text = strip_ansi(segment.text) if no_color else segment.text
        out.append(colors.sgr(segment.fg_color, segment.bg_color, no_color=no_color))
        out.append(text)
        out.append(colors.sgr(segment.bg_color, next_bg, no_color=no_color))
        out.append(SEGMENT_SEPARATOR)
    out.append(colors.reset(no_color=no_color))
    return "".join(out)


def render_continuation(*, no_color: bool = False) -> str:
    """Return the second-line marker used when the prompt is split."""
    return (
        "\n"
        f"{colors.sgr(colors.BLACK, colors.BLUE, no_color=no_color)}{CONTINUATION_MARKER}"
        f"{colors.sgr(colors.BLUE, colors.DEFAULT, no_color=no_color)}{SEGMENT_SEPARATOR}"
        f"{colors.reset(no_color=no_color)}"
    )


def render_prompt(line: Line, layout: Sequence[SegmentLayout], *, no_color: bool = False) -> str:
    """Render a resolved layout into the text written to the shell."""
    if line == Line.OVERFLOW_LINE:
        return render_overflow(no_color=no_color)

    rendered = [entry.segment.render(entry.current_size) for entry in layout]
    prompt = render_segments(rendered, no_color=no_color)
    if line == Line.SINGLE_LINE:
        return f"{prompt} "
    return f"{prompt}{render_continuation(no_color=no_color)} "
