"""Capabilities injected into task bodies and their local implementations."""

from sfstack.backend.base import Console, FileSystem, ProcessRunner, Prompter
from sfstack.backend.console import RichConsole
from sfstack.backend.filesystem import LocalFileSystem
from sfstack.backend.process import COMMAND_NOT_FOUND_STATUS, SubprocessRunner
from sfstack.backend.prompts import ClickPrompter, DefaultsPrompter

__all__ = [
    "COMMAND_NOT_FOUND_STATUS",
    "ClickPrompter",
    "Console",
    "DefaultsPrompter",
    "FileSystem",
    "LocalFileSystem",
    "ProcessRunner",
    "Prompter",
    "RichConsole",
    "SubprocessRunner",
]
