"""Module entrypoint for `python -m neveridle`."""

import sys

from neveridle.cli import main


if __name__ == "__main__":
    sys.exit(main())
