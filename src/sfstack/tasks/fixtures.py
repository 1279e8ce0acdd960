"""Doctrine fixtures tasks."""

from __future__ import annotations

from sfstack.dispatcher import TaskContext, TaskSpec


def install_fixtures(ctx: TaskContext) -> None:
    """Install the fixtures bundle and, on request, FakerPHP."""

    ctx.console.title("Installing Fixtures Bundle")
    ctx.composer("require", "--dev", "doctrine/doctrine-fixtures-bundle")

    ctx.console.new_line()
    if ctx.confirm("Would you use FakerPHP?", False):
        ctx.console.section("Installing FakerPHP")
        ctx.composer("require", "--dev", "fakerphp/faker")
        ctx.console.new_line()
        ctx.console.success("FakerPHP installed")


def load_fixtures(ctx: TaskContext) -> None:
    ctx.console.title("Loading Fixtures")
    ctx.console_command("doctrine:fixtures:load", "--no-interaction")
    ctx.console.new_line()
    ctx.console.success("Fixtures loaded")


TASKS = (
    TaskSpec(
        "fixtures",
        "install-fixtures",
        "Install Fixtures Bundle",
        install_fixtures,
        aliases=("fixt:install",),
    ),
    TaskSpec("fixtures", "load-fixtures", "Load Fixtures", load_fixtures, aliases=("fixt:load",)),
)
