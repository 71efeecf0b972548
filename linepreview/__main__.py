"""Module entrypoint for ``python -m linepreview``.

All argument parsing and runtime setup happen in ``linepreview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
