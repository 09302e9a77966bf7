"""Module entrypoint for running safetext as ``python -m safetext``."""

from __future__ import annotations

from safetext.cli import main


if __name__ == "__main__":
    main()
