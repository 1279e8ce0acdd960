"""Prompter implementations."""

from __future__ import annotations

import logging

import rich_click as click

logger = logging.getLogger(__name__)


class ClickPrompter:
    """Blocking terminal prompts."""

    def ask(self, question: str, default: str | None = None) -> str:
        if default is None:
            return str(click.prompt(question, type=str))
        # An empty default still has to be accepted on a bare Enter.
        return str(click.prompt(question, default=default, show_default=bool(default), type=str))

    def confirm(self, question: str, default: bool = False) -> bool:
        return click.confirm(question.rstrip(), default=default)


class DefaultsPrompter:
    """Answer every question with its default, for --no-interaction runs."""

    def ask(self, question: str, default: str | None = None) -> str:
        answer = default or ""
        logger.info("Answering %r with %r", question, answer)
        return answer

    def confirm(self, question: str, default: bool = False) -> bool:
        logger.info("Answering %r with %s", question, "yes" if default else "no")
        return default
