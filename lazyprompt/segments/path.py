"""Working-directory segment.

Shows the current directory relative to ``$HOME`` (``~``) or to the
filesystem root (``/``), one component per powerline sub-separator.
When squeezed, the path keeps its tail and gets a leading ``...``.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path, PurePath

from .. import colors
from ..ansi import grapheme_len, sanitize_terminal_text, take_last_graphemes
from . import Context, RenderedSegment, ShrinkPriority

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "\ue0b1"
COMPONENT_SEPARATOR = f" {PATH_SEPARATOR} "
MIN_PATH_SIZE = 5
ELLIPSIS_PREFIX = " ..."


class PathAnchor(enum.Enum):
    HOME = "~"
    ROOT = "/"


def relative_path(cwd: PurePath, home: PurePath | None) -> tuple[PathAnchor, PurePath]:
    """Return ``cwd`` relative to ``home`` when inside it, else relative to ``/``."""
    if home is not None and cwd.is_relative_to(home):
        return PathAnchor.HOME, cwd.relative_to(home)
    if cwd.is_absolute():
        return PathAnchor.ROOT, cwd.relative_to(cwd.anchor)
    return PathAnchor.ROOT, cwd


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


class PathSegment:
    def __init__(self, components: list[str], anchor: PathAnchor) -> None:
        self.components = [sanitize_terminal_text(component) for component in components]
        self.anchor = anchor
        self.preferred_width = grapheme_len(self._full_text())

    @classmethod
    def from_context(cls, context: Context, home: PurePath | None = None) -> PathSegment | None:
        if context.path is None:
            logger.debug("path segment absent: working directory unknown")
            return None
        if home is None:
            home = _home_dir()
        anchor, rel = relative_path(context.path, home)
        return cls(list(rel.parts), anchor)

    def _body(self) -> str:
        return "".join(f"{COMPONENT_SEPARATOR}{component}" for component in self.components)

    def _full_text(self) -> str:
        return f" {self.anchor.value}{self._body()} "

    def base_width(self, shrink: ShrinkPriority) -> int:
        if shrink == ShrinkPriority.UNCONSTRAINED:
            return self.preferred_width
        if shrink == ShrinkPriority.SHRINK_COMFORTABLE:
            return min(MIN_PATH_SIZE, self.preferred_width)
        return 1

    def actual_width_under(self, max_size: int) -> int:
        if max_size >= self.preferred_width:
            return self.preferred_width
        if max_size >= MIN_PATH_SIZE:
            return max_size
        return 1

    def render(self, max_size: int) -> RenderedSegment:
        if max_size >= self.preferred_width:
            text = self._full_text()
        elif max_size >= MIN_PATH_SIZE:
            tail = take_last_graphemes(self._body(), max_size - len(ELLIPSIS_PREFIX) - 1)
            text = f"{ELLIPSIS_PREFIX}{tail} "
        else:
            text = " "
        return RenderedSegment(text=text, fg_color=colors.BLACK, bg_color=colors.BLUE)
