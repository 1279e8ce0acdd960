"""Capability interfaces injected into task bodies."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ProcessRunner(Protocol):
    """Runs one external command synchronously with inherited streams."""

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run ``command`` to completion and return its exit status."""


class Prompter(Protocol):
    """Interactive text and yes/no input."""

    def ask(self, question: str, default: str | None = None) -> str:
        """Return the answer to a free-text question."""

    def confirm(self, question: str, default: bool = False) -> bool:
        """Return the answer to a yes/no question."""


class FileSystem(Protocol):
    """Filesystem operations used by tasks; relative paths are project-relative."""

    def resolve(self, path: str | Path) -> Path: ...

    def exists(self, path: str | Path) -> bool: ...

    def is_file(self, path: str | Path) -> bool: ...

    def read_text(self, path: str | Path) -> str: ...

    def write_text(self, path: str | Path, content: str) -> None: ...

    def append_text(self, path: str | Path, content: str) -> None: ...

    def touch(self, path: str | Path) -> None: ...

    def copy(self, source: str | Path, target: str | Path) -> None: ...

    def copy_tree(self, source: str | Path, target: str | Path) -> None: ...

    def remove_tree(self, path: str | Path) -> None: ...

    def clear_directory(self, path: str | Path) -> None: ...


class Console(Protocol):
    """Structured, non-interactive status output."""

    def title(self, message: str) -> None: ...

    def section(self, message: str) -> None: ...

    def text(self, lines: str | Sequence[str]) -> None: ...

    def comment(self, lines: str | Sequence[str]) -> None: ...

    def info(self, lines: str | Sequence[str]) -> None: ...

    def success(self, lines: str | Sequence[str]) -> None: ...

    def warning(self, lines: str | Sequence[str]) -> None: ...

    def error(self, lines: str | Sequence[str]) -> None: ...

    def new_line(self, count: int = 1) -> None: ...

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None: ...
