"""Entry point for the time-now demo.

Usage:
    python -m time_now [--json]
"""

import sys

from time_now.cli import run_cli


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
