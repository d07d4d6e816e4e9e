"""Entry point for `python -m wikichat`."""

from wikichat.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
