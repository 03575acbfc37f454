"""Module entrypoint for ``python -m lazyprompt``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and rendering happen in ``lazyprompt.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
