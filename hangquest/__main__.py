"""Module entrypoint for `python -m hangquest`."""

from hangquest.console import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
