"""Symfony console maintenance tasks."""

from __future__ import annotations

from sfstack.dispatcher import TaskContext, TaskSpec


def clear_cache(ctx: TaskContext) -> None:
    ctx.console.title("Clearing Cache")
    ctx.console_command("cache:clear")


TASKS = (TaskSpec("symfony", "clear-cache", "Clear Cache", clear_cache, aliases=("sf:cc",)),)
