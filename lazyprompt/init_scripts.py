"""Shell integration snippets printed by ``lazyprompt --init SHELL``.

Each snippet re-runs lazyprompt before every prompt, passing the terminal
width, the last pipeline's exit statuses, and the background job count.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

SHELLS: tuple[str, ...] = ("zsh", "bash", "fish")
EXE_PATH_ERROR_SCRIPT = "echo 'Error getting executable path for prompt'; (exit 1)"


def resolve_exe_command(argv0: str | None = None) -> str | None:
    """Return a shell-quoted command that re-invokes this program.

    Module-mode runs (``python -m lazyprompt``) re-invoke through the current
    interpreter. Returns ``None`` when no executable can be located.
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        return None

    candidate = Path(argv0)
    if candidate.name == "__main__.py":
        return f"{shlex.quote(sys.executable)} -m lazyprompt"
    if not candidate.is_file():
        found = shutil.which(argv0)
        if found is None:
            logger.debug("cannot locate executable for %r", argv0)
            return None
        candidate = Path(found)
    try:
        resolved = candidate.resolve(strict=True)
    except OSError as exc:
        logger.debug("cannot resolve executable %s: %s", candidate, exc)
        return None
    return shlex.quote(str(resolved))


def init_script_zsh(exe: str) -> str:
    return (
        "unsetopt promptsubst\n"
        "precmd() {\n"
        '    local last_status="$pipestatus"\n'
        f'    PS1="$({exe} --columns="$COLUMNS" --status="$last_status" --jobs="${{#jobstates}}")"\n'
        "}\n"
    )


def init_script_bash(exe: str) -> str:
    return (
        "shopt -u promptvars\n"
        "__lazyprompt_precmd() {\n"
        '    local last_status="${PIPESTATUS[*]}"\n'
        f'    PS1="$({exe} --columns="$COLUMNS" --status="$last_status" --jobs="$(jobs -p | wc -l)")"\n'
        "}\n"
        "PROMPT_COMMAND=__lazyprompt_precmd\n"
    )


def init_script_fish(exe: str) -> str:
    return (
        "function fish_prompt\n"
        "    set -l last_pipestatus $pipestatus\n"
        f'    {exe} --columns="$COLUMNS" --status="$last_pipestatus" --jobs=(count (jobs -p))\n'
        "end\n"
    )


_SCRIPT_BUILDERS = {
    "zsh": init_script_zsh,
    "bash": init_script_bash,
    "fish": init_script_fish,
}


def init_script(shell: str, exe: str | None) -> str:
    """Return the integration snippet for ``shell``, or the error fallback."""
    if exe is None:
        return EXE_PATH_ERROR_SCRIPT + "\n"
    return _SCRIPT_BUILDERS[shell](exe)
