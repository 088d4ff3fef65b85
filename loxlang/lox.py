"""Running Lox source from a string, a file or an interactive prompt."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from loxlang.errors import LoxError, print_error
from loxlang.scanner import Scanner


class Lox:
    """An interpreter session; output goes to ``out`` (standard output by default)."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self.had_error = False

    @property
    def out(self) -> TextIO:
        return sys.stdout if self._out is None else self._out

    def run(self, script: str) -> None:
        """Scan ``script`` and print its tokens; raises ScanError on failure."""
        print(f"Running :\n{script}", file=self.out)
        for token in Scanner(script).scan_tokens():
            print(repr(token), file=self.out)

    def error(self, line: int, message: str) -> None:
        """Report an error on ``line`` and remember that one occurred."""
        self._report(line, "", message)

    def _report(self, line: int, location: str, message: str) -> None:
        self.had_error = True
        print(f"[line {line}] Error {location}: {message}", file=self.out)


def run_file(file_path: str) -> None:
    """Run the script stored at ``file_path``.

    Raises OSError if the file cannot be read and LoxError if it fails to run.
    """
    script = Path(file_path).read_text()
    Lox().run(script)


def run_prompt(
    lox: Optional[Lox] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read and run one line at a time until end of input."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    session = Lox(out=stdout) if lox is None else lox

    while True:
        out.write("> ")
        out.flush()
        try:
            line = source.readline()
        except OSError:
            break
        if not line:
            break
        try:
            session.run(line.strip())
        except LoxError as err:
            print_error(err)