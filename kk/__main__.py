"""Entrypoint for `python -m kk`."""

from kk.cli import main


if __name__ == "__main__":
    main()
