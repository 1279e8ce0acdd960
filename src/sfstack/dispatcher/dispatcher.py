"""Run registered tasks and turn their failures into exit statuses."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sfstack.backend.base import Console, FileSystem, ProcessRunner, Prompter
from sfstack.config import Settings
from sfstack.dispatcher.context import TaskContext
from sfstack.dispatcher.models import ExternalProcessError
from sfstack.dispatcher.registry import TaskRegistry
from sfstack.envfile import ConfigDecodeError, ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_NOT_FOUND_STATUS = 1


class TaskDispatcher:
    """Executes one task body per ``invoke`` with the injected capabilities.

    Steps run strictly in order. The first failing command ends the task and
    its status is returned; nothing already done is rolled back.
    """

    def __init__(  # noqa: PLR0913
        self,
        *,
        registry: TaskRegistry,
        settings: Settings,
        runner: ProcessRunner,
        prompter: Prompter,
        fs: FileSystem,
        console: Console,
    ) -> None:
        self.registry = registry
        self.settings = settings
        self.runner = runner
        self.prompter = prompter
        self.fs = fs
        self.console = console

    def invoke(self, identifier: str, args: Sequence[str] = ()) -> int:
        """Run the task registered under ``identifier`` (name or alias).

        Raises UnknownTaskError for an unregistered identifier.
        """

        spec = self.registry.get(identifier)
        context = TaskContext(
            settings=self.settings,
            registry=self.registry,
            runner=self.runner,
            prompter=self.prompter,
            fs=self.fs,
            console=self.console,
            args=tuple(args),
            _call_stack=[spec.identifier],
        )
        logger.info("Task %s started (requested as %s)", spec.identifier, identifier)
        try:
            spec.body(context)
        except ExternalProcessError as error:
            logger.error("Task %s failed: %s", spec.identifier, error)
            self.console.new_line()
            self.console.error(
                [
                    f"Command failed with exit code {error.exit_code}:",
                    " ".join(error.command),
                ],
            )
            return error.exit_code
        except (ConfigNotFoundError, ConfigDecodeError) as error:
            logger.error("Task %s failed: %s", spec.identifier, error)
            self.console.error(str(error))
            return CONFIG_NOT_FOUND_STATUS
        logger.info("Task %s completed", spec.identifier)
        return 0
