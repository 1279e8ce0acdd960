"""Shared test fixtures: scripted capabilities for task bodies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from sfstack.backend import LocalFileSystem
from sfstack.config import Settings
from sfstack.dispatcher import TaskDispatcher
from sfstack.tasks import build_registry


@dataclass
class FakeRunner:
    """Record commands; return scripted statuses (0 unless listed in ``statuses``)."""

    statuses: dict[tuple[str, ...], int] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    cwds: list[Path | None] = field(default_factory=list)

    def run(self, command: Sequence[str], *, cwd: Path | None = None) -> int:
        recorded = tuple(command)
        self.calls.append(recorded)
        self.cwds.append(cwd)
        return self.statuses.get(recorded, 0)


@dataclass
class ScriptedPrompter:
    """Answer questions from a queue, in order."""

    answers: list[str | bool] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)

    def ask(self, question: str, default: str | None = None) -> str:
        self.questions.append(question)
        answer = self._next(question)
        assert isinstance(answer, str), f"expected text answer for {question!r}"
        return answer

    def confirm(self, question: str, default: bool = False) -> bool:
        self.questions.append(question)
        answer = self._next(question)
        assert isinstance(answer, bool), f"expected yes/no answer for {question!r}"
        return answer

    def _next(self, question: str) -> str | bool:
        if not self.answers:
            raise AssertionError(f"Unexpected question: {question!r}")
        return self.answers.pop(0)


@dataclass
class RecordingConsole:
    """Keep every output call as (kind, lines)."""

    records: list[tuple[str, list[str]]] = field(default_factory=list)

    def _record(self, kind: str, lines: str | Sequence[str]) -> None:
        self.records.append((kind, [lines] if isinstance(lines, str) else list(lines)))

    def title(self, message: str) -> None:
        self._record("title", message)

    def section(self, message: str) -> None:
        self._record("section", message)

    def text(self, lines: str | Sequence[str]) -> None:
        self._record("text", lines)

    def comment(self, lines: str | Sequence[str]) -> None:
        self._record("comment", lines)

    def info(self, lines: str | Sequence[str]) -> None:
        self._record("info", lines)

    def success(self, lines: str | Sequence[str]) -> None:
        self._record("success", lines)

    def warning(self, lines: str | Sequence[str]) -> None:
        self._record("warning", lines)

    def error(self, lines: str | Sequence[str]) -> None:
        self._record("error", lines)

    def new_line(self, count: int = 1) -> None:
        pass

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        self.records.append(("table", [" | ".join(row) for row in rows]))

    def of_kind(self, kind: str) -> list[list[str]]:
        return [lines for recorded_kind, lines in self.records if recorded_kind == kind]


@dataclass
class Harness:
    dispatcher: TaskDispatcher
    runner: FakeRunner
    prompter: ScriptedPrompter
    console: RecordingConsole
    project_dir: Path

    def invoke(self, identifier: str, *answers: str | bool) -> int:
        self.prompter.answers.extend(answers)
        exit_code = self.dispatcher.invoke(identifier)
        assert not self.prompter.answers, f"unused answers: {self.prompter.answers}"
        return exit_code


@pytest.fixture()
def harness(tmp_path: Path) -> Harness:
    project_dir = tmp_path / "demo-app"
    project_dir.mkdir()
    runner = FakeRunner()
    prompter = ScriptedPrompter()
    console = RecordingConsole()
    dispatcher = TaskDispatcher(
        registry=build_registry(),
        settings=Settings(project_dir=project_dir),
        runner=runner,
        prompter=prompter,
        fs=LocalFileSystem(project_dir),
        console=console,
    )
    return Harness(
        dispatcher=dispatcher,
        runner=runner,
        prompter=prompter,
        console=console,
        project_dir=project_dir,
    )
