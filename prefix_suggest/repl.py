"""Line-based prompt loop around a :class:`~prefix_suggest.engine.Suggester`."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from .dictionary import Entry
from .engine import Suggester

PROMPT = "Enter prefix (or 'exit' to quit): "


def format_suggestions(results: Iterable[Entry]) -> list[str]:
    """Render ``results`` as a 1-indexed ``word (frequency)`` listing."""
    return [
        f"  {i}. {entry.word} ({entry.frequency})"
        for i, entry in enumerate(results, start=1)
    ]


def run_repl(
    suggester: Suggester,
    k: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Prompt for prefixes until EOF or ``exit`` and print suggestions."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        prefix = line.rstrip("\r\n")
        if prefix == "exit":
            break

        suggestions = suggester.suggest(prefix, k)
        if not suggestions:
            stdout.write("No matches found.\n\n")
            continue

        stdout.write("Suggestions:\n")
        for row in format_suggestions(suggestions):
            stdout.write(row + "\n")
        stdout.write("\n")

    stdout.write("Goodbye!\n")
