
"""Module entrypoint for `python -m schematize.checker`.

Delegates to the checker CLI implementation.
"""

from .run_check import main


if __name__ == "__main__":
    main()
