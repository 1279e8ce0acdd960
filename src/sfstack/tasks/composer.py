"""Composer dependency tasks."""

from __future__ import annotations

from sfstack.dispatcher import TaskContext, TaskSpec


def composer_install(ctx: TaskContext) -> None:
    ctx.console.title("Installing composer dependencies")
    ctx.composer("install")
    ctx.console.new_line()
    ctx.console.success("Composer dependencies installed")


TASKS = (
    TaskSpec(
        "composer",
        "composer-install",
        "Install composer dependencies",
        composer_install,
        aliases=("comp:install",),
    ),
)
