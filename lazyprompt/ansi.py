"""ANSI-aware grapheme measurement and truncation utilities.

Every prompt width is counted in grapheme clusters of the visible text.
Escape sequences are stripped before measuring so inline color codes never
count toward a segment's width.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

import regex

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
# Extended grapheme clusters as defined by UAX #29.
_GRAPHEME_RE = regex.compile(r"\X")


def strip_ansi(text: str) -> str:
    """Return ``text`` with all ANSI escape sequences removed."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_RE.sub("", text)


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes so names cannot move the cursor or recolor the prompt."""
    if _CONTROL_RE.search(source) is None:
        return source
    # C0 controls + DEL + C1 controls.
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield grapheme clusters of ``text`` in order."""
    for match in _GRAPHEME_RE.finditer(text):
        yield match.group(0)


def grapheme_len(text: str) -> int:
    """Return the number of visible grapheme clusters in ``text``."""
    return sum(1 for _ in iter_graphemes(strip_ansi(text)))


def take_graphemes(text: str, count: int) -> str:
    """Return the first ``count`` grapheme clusters of plain ``text``."""
    if count <= 0:
        return ""
    out: list[str] = []
    for cluster in iter_graphemes(text):
        if len(out) >= count:
            break
        out.append(cluster)
    return "".join(out)


def take_last_graphemes(text: str, count: int) -> str:
    """Return the last ``count`` grapheme clusters of plain ``text``."""
    if count <= 0:
        return ""
    clusters = list(iter_graphemes(text))
    return "".join(clusters[-count:])
