"""
Entry point for running aerounits as a module.

Usage:
    python -m aerounits convert 10 ms kph
    python -m aerounits calc multiply 1:m 200:cm
    python -m aerounits serve --port 8000
"""

import sys

from aerounits.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
