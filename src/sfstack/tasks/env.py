"""Inspect environment files."""

from __future__ import annotations

from sfstack.dispatcher import TaskContext, TaskSpec


def show_env(ctx: TaskContext) -> None:
    """Load a .env file and print the variables it defines."""

    ctx.console.title("Show .env variables")
    env_path = ctx.ask("Enter the path to the .env file", ".env")
    env = ctx.load_env(env_path)
    ctx.console.table(
        ("Variable", "Value"),
        [(key, "" if value is None else str(value)) for key, value in env.items()],
    )


TASKS = (
    TaskSpec("env", "show-env", "Show .env variables", show_env, aliases=("env:show",)),
)
