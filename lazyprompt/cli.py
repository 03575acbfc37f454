"""Command-line front door for lazyprompt.

Parses the shell-supplied facts (terminal width, exit statuses, job count),
builds the prompt segments, lays them out, and writes the prompt to stdout.
With ``--init SHELL`` it prints the shell integration snippet instead.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import load_prompt_config
from .init_scripts import SHELLS, init_script, resolve_exe_command
from .layout import layout_segments
from .render import render_prompt
from .segments import Context, build_segments

logger = logging.getLogger(__name__)

COLUMNS_MARGIN = 3
DEBUG_ENV_VAR = "LAZYPROMPT_DEBUG"


def _optional_nonnegative_int(value: str) -> int | None:
    """argparse type for integers a shell may pass as an empty string."""
    value = value.strip()
    if not value:
        return None
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _current_dir() -> Path | None:
    """Return the working directory, or ``None`` when it no longer exists."""
    try:
        return Path.cwd()
    except OSError as exc:
        logger.debug("working directory unavailable: %s", exc)
        return None


def terminal_width_for_columns(columns: int | None) -> int | None:
    """Reserve a few columns for the cursor; ``None`` stays unbounded."""
    if columns is None:
        return None
    return max(0, columns - COLUMNS_MARGIN)


def configure_logging(debug: bool) -> None:
    """Send debug logs to stderr so they never mix into the prompt text."""
    if not debug and os.environ.get(DEBUG_ENV_VAR, "") in {"", "0"}:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyprompt",
        description="Render a powerline-style shell prompt that fits the terminal width.",
    )
    parser.add_argument("--init", choices=SHELLS, metavar="SHELL", help=f"Print init script for SHELL ({', '.join(SHELLS)}).")
    parser.add_argument("-s", "--status", metavar="PIPESTATUS", help="Status or pipestatus of the last command.")
    parser.add_argument(
        "-c",
        "--columns",
        type=_optional_nonnegative_int,
        metavar="COLS",
        help="Terminal width in characters (default: unbounded).",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=_optional_nonnegative_int,
        metavar="JOBS",
        help="Number of background jobs.",
    )
    parser.add_argument(
        "--min-headroom",
        type=_optional_nonnegative_int,
        metavar="N",
        help="Free columns required to keep the prompt on one line (default: config or 40).",
    )
    parser.add_argument("--no-color", action="store_true", help="Emit the prompt without color escapes.")
    parser.add_argument("--debug", action="store_true", help="Log layout decisions to stderr.")
    return parser


def render_for_args(args: argparse.Namespace) -> str:
    """Build, lay out and render the prompt described by parsed ``args``."""
    config = load_prompt_config()
    context = Context(
        path=_current_dir(),
        pipestatus=args.status,
        jobs=args.jobs or 0,
        git_timeout_seconds=config.git_timeout_seconds,
    )
    min_headroom = args.min_headroom if args.min_headroom is not None else config.min_headroom
    segments = build_segments(context)
    line, layout = layout_segments(segments, terminal_width_for_columns(args.columns), min_headroom)
    return render_prompt(line, layout, no_color=args.no_color or config.no_color)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and write either the prompt or an init script."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    if args.init is not None:
        sys.stdout.write(init_script(args.init, resolve_exe_command()))
        return

    sys.stdout.write(render_for_args(args))
    sys.stdout.flush()


if __name__ == "__main__":
    main()
