"""Module entrypoint for ``python -m lazyoutline``.

All argument parsing and rendering happen in ``lazyoutline.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
