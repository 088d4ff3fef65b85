"""Command-line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys
from typing import List, Optional

from loxlang.errors import ScanError
from loxlang.lox import run_file, run_prompt

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATAERR = 65


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) > 1:
        print("Usage: jlox [script]")
        return EXIT_USAGE
    if len(args) == 1:
        try:
            run_file(args[0])
        except ScanError:
            return EXIT_DATAERR
        return EXIT_OK
    run_prompt()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())