"""Symfony-style console blocks rendered with rich."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console as RichTerminal
from rich.table import Table
from rich.text import Text

_BLOCK_STYLES = {
    "INFO": "bold green",
    "OK": "bold black on green",
    "WARNING": "bold black on yellow",
    "ERROR": "bold white on red",
}


class RichConsole:
    """Write titles, sections and status blocks to the terminal."""

    def __init__(self, terminal: RichTerminal | None = None) -> None:
        self._terminal = terminal or RichTerminal(highlight=False, soft_wrap=True)

    def title(self, message: str) -> None:
        self._terminal.print()
        self._terminal.print(Text(message, style="bold green"))
        self._terminal.print(Text("=" * len(message), style="bold green"))
        self._terminal.print()

    def section(self, message: str) -> None:
        self._terminal.print(Text(message, style="bold yellow"))
        self._terminal.print(Text("-" * len(message), style="bold yellow"))
        self._terminal.print()

    def text(self, lines: str | Sequence[str]) -> None:
        for line in _as_lines(lines):
            self._terminal.print(Text(f" {line}"))

    def comment(self, lines: str | Sequence[str]) -> None:
        for line in _as_lines(lines):
            self._terminal.print(Text(f" // {line}", style="dim"))
        self._terminal.print()

    def info(self, lines: str | Sequence[str]) -> None:
        self._block("INFO", lines)

    def success(self, lines: str | Sequence[str]) -> None:
        self._block("OK", lines)

    def warning(self, lines: str | Sequence[str]) -> None:
        self._block("WARNING", lines)

    def error(self, lines: str | Sequence[str]) -> None:
        self._block("ERROR", lines)

    def new_line(self, count: int = 1) -> None:
        for _ in range(count):
            self._terminal.print()

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        table = Table(*headers, show_lines=False)
        for row in rows:
            table.add_row(*(Text(cell) for cell in row))
        self._terminal.print(table)
        self._terminal.print()

    def _block(self, label: str, lines: str | Sequence[str]) -> None:
        items = _as_lines(lines)
        if not items:
            return
        style = _BLOCK_STYLES[label]
        prefix = f" [{label}] "
        indent = " " * len(prefix)
        for index, line in enumerate(items):
            if index:
                self._terminal.print()
            self._terminal.print(Text(f"{prefix if index == 0 else indent}{line}", style=style))
        self._terminal.print()


def _as_lines(lines: str | Sequence[str]) -> list[str]:
    if isinstance(lines, str):
        return [lines]
    return list(lines)
