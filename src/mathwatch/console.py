"""Console output streams passed explicitly into components."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

SUCCESS_MARK = "✓"
FAILURE_MARK = "✗"
BANNER_WIDTH = 40


@dataclass
class Console:
    """Pair of text streams for progress (out) and failure (err) messages.

    Defaults to the process's stdout/stderr. Tests pass ``io.StringIO``.
    """

    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def print(self, message: str = "") -> None:
        print(message, file=self.out)

    def print_error(self, message: str) -> None:
        print(message, file=self.err)

    def success(self, message: str) -> None:
        self.print(f"{SUCCESS_MARK} {message}")

    def failure(self, message: str) -> None:
        self.print_error(f"{FAILURE_MARK} {message}")

    def banner(self, title: str) -> None:
        rule = "=" * BANNER_WIDTH
        self.print(rule)
        self.print(f" {title}")
        self.print(rule)

    def section(self, title: str) -> None:
        self.print()
        self.print(f"--- {title} ---")
