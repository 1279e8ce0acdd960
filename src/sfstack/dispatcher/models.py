"""Task descriptors and dispatcher errors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sfstack.dispatcher.context import TaskContext

TaskBody = Callable[["TaskContext"], None]


@dataclass(frozen=True, slots=True)
class TaskSpec:
    """One registered task: where it lives, how it is called and what it runs."""

    namespace: str
    name: str
    description: str
    body: TaskBody = field(compare=False)
    aliases: tuple[str, ...] = ()

    @property
    def identifier(self) -> str:
        return f"{self.namespace}:{self.name}"

    @property
    def identifiers(self) -> tuple[str, ...]:
        return (self.identifier, *self.aliases)


class ExternalProcessError(RuntimeError):
    """An invoked command exited with a non-zero status."""

    def __init__(self, command: tuple[str, ...], exit_code: int) -> None:
        super().__init__(f"Command exited with status {exit_code}: {' '.join(command)}")
        self.command = command
        self.exit_code = exit_code


class UnknownTaskError(LookupError):
    """No task is registered under the requested identifier or alias."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown task: {identifier!r}")
        self.identifier = identifier


class TaskRegistryError(ValueError):
    """Invalid registration: duplicate identifier or frozen registry."""
