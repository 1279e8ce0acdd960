"""Task registry and fail-fast dispatcher."""

from sfstack.dispatcher.context import TaskContext
from sfstack.dispatcher.dispatcher import CONFIG_NOT_FOUND_STATUS, TaskDispatcher
from sfstack.dispatcher.models import (
    ExternalProcessError,
    TaskBody,
    TaskRegistryError,
    TaskSpec,
    UnknownTaskError,
)
from sfstack.dispatcher.registry import TaskRegistry

__all__ = [
    "CONFIG_NOT_FOUND_STATUS",
    "ExternalProcessError",
    "TaskBody",
    "TaskContext",
    "TaskDispatcher",
    "TaskRegistry",
    "TaskRegistryError",
    "TaskSpec",
    "UnknownTaskError",
]
