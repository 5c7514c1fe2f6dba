"""Module entrypoint for ``python -m scifileviewer``.

This keeps module-mode execution behavior identical to the console script.
Argument parsing and runtime setup happen in ``scifileviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
