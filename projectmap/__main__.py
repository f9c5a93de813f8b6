"""Module entrypoint for ``python -m projectmap``.

All argument parsing happens in ``projectmap.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
