"""Module entrypoint for `python -m doomtype`."""

from doomtype.app import main

if __name__ == "__main__":  # pragma: no cover
    main()
