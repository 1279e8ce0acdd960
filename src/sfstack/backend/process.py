"""Subprocess-based process runner."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_STATUS = 127


class SubprocessRunner:
    """Run commands in the foreground, sharing stdin/stdout/stderr with the CLI."""

    def __init__(self, env: dict[str, str] | None = None) -> None:
        self._env = env

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> int:
        argv = list(command)
        if not argv:
            raise ValueError("Cannot run an empty command.")
        logger.info("Running %s (cwd=%s)", shlex.join(argv), cwd or Path.cwd())
        try:
            completed = subprocess.run(  # noqa: S603
                _resolve_argv(argv),
                cwd=str(cwd) if cwd is not None else None,
                env=self._env,
                check=False,
            )
        except FileNotFoundError:
            logger.error("Command not found: %s", argv[0])
            return COMMAND_NOT_FOUND_STATUS
        if completed.returncode != 0:
            logger.warning("Command exited with status %d: %s", completed.returncode, argv[0])
        return completed.returncode


def _resolve_argv(argv: list[str]) -> list[str]:
    """Resolve argv[0] via PATH; route Windows .cmd/.bat shims through cmd.exe."""

    head = argv[0]
    if any(sep and sep in head for sep in ("/", "\\", os.path.sep, os.path.altsep)):
        return argv
    resolved = shutil.which(head)
    if resolved is None:
        return argv
    if os.name == "nt" and Path(resolved).suffix.lower() in {".cmd", ".bat"}:
        comspec = os.environ.get("ComSpec", "cmd.exe")
        return [comspec, "/d", "/c", resolved, *argv[1:]]
    return [resolved, *argv[1:]]
