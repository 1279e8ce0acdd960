"""Per-invocation capabilities available to task bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sfstack.backend.base import Console, FileSystem, ProcessRunner, Prompter
from sfstack.config import Settings
from sfstack.dispatcher.models import ExternalProcessError
from sfstack.dispatcher.registry import TaskRegistry
from sfstack.envfile import ConfigDecodeError, ConfigNotFoundError, EnvScalar, parse_env

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskContext:
    """Everything a task body may touch. Discarded when the task ends."""

    settings: Settings
    registry: TaskRegistry
    runner: ProcessRunner
    prompter: Prompter
    fs: FileSystem
    console: Console
    args: tuple[str, ...] = ()
    _call_stack: list[str] = field(default_factory=list)

    def run(self, *command: str) -> None:
        """Run one command; a non-zero status raises ExternalProcessError."""

        exit_code = self.runner.run(command, cwd=self.settings.project_dir)
        if exit_code != 0:
            raise ExternalProcessError(tuple(command), exit_code)

    def ask(self, question: str, default: str | None = None) -> str:
        return self.prompter.ask(question, default)

    def confirm(self, question: str, default: bool = False) -> bool:
        return self.prompter.confirm(question, default)

    def exists(self, path: str | Path) -> bool:
        return self.fs.exists(path)

    def load_env(self, path: str | Path, *, typed: bool = False) -> dict[str, EnvScalar]:
        if not self.fs.is_file(path):
            raise ConfigNotFoundError(self.fs.resolve(path))
        try:
            text = self.fs.read_text(path)
        except UnicodeDecodeError as error:
            raise ConfigDecodeError(self.fs.resolve(path)) from error
        return parse_env(text, typed=typed)

    def call(self, identifier: str) -> None:
        """Run another registered task inside this invocation."""

        spec = self.registry.get(identifier)
        if spec.identifier in self._call_stack:
            raise RuntimeError(f"Task {spec.identifier!r} calls itself recursively.")
        logger.debug("Calling sub-task %s", spec.identifier)
        self._call_stack.append(spec.identifier)
        try:
            spec.body(self)
        finally:
            self._call_stack.pop()

    # Shortcuts for the external tools, honouring the configured executables.

    def composer(self, *args: str) -> None:
        self.run(self.settings.binaries.composer, *args)

    def console_command(self, *args: str) -> None:
        self.run(self.settings.binaries.symfony, "console", *args)

    def compose(self, *args: str) -> None:
        self.run(
            self.settings.binaries.docker,
            "compose",
            "--env-file",
            self.settings.env_file,
            *args,
        )

    def docker(self, *args: str) -> None:
        self.run(self.settings.binaries.docker, *args)

    def git(self, *args: str) -> None:
        self.run(self.settings.binaries.git, *args)
