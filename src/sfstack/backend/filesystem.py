"""Local filesystem rooted at the project directory."""

from __future__ import annotations

import shutil
from pathlib import Path


class LocalFileSystem:
    """Resolve relative paths against ``root``; absolute paths are used as-is."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def resolve(self, path: str | Path) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.root / candidate

    def exists(self, path: str | Path) -> bool:
        return self.resolve(path).exists()

    def is_file(self, path: str | Path) -> bool:
        return self.resolve(path).is_file()

    def read_text(self, path: str | Path) -> str:
        return self.resolve(path).read_text("utf-8")

    def write_text(self, path: str | Path, content: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, "utf-8")

    def append_text(self, path: str | Path, content: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as handle:
            handle.write(content)

    def touch(self, path: str | Path) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch()

    def copy(self, source: str | Path, target: str | Path) -> None:
        destination = self.resolve(target)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(self.resolve(source), destination)

    def copy_tree(self, source: str | Path, target: str | Path) -> None:
        """Merge ``source`` into ``target``, overwriting files that exist in both."""

        shutil.copytree(
            self.resolve(source),
            self.resolve(target),
            symlinks=True,
            dirs_exist_ok=True,
        )

    def remove_tree(self, path: str | Path) -> None:
        target = self.resolve(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        elif target.exists() or target.is_symlink():
            target.unlink()

    def clear_directory(self, path: str | Path) -> None:
        """Delete everything inside ``path`` but keep the directory itself."""

        target = self.resolve(path)
        if not target.is_dir():
            return
        for child in target.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
