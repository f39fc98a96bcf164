"""Allows running the CLI with ``python -m jsonvault``."""

from jsonvault.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
