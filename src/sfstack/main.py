"""CLI entrypoint for sfstack."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from sfstack import __version__
from sfstack.backend import (
    ClickPrompter,
    DefaultsPrompter,
    LocalFileSystem,
    RichConsole,
    SubprocessRunner,
)
from sfstack.config import Settings, SettingsError
from sfstack.dispatcher import TaskDispatcher, TaskSpec
from sfstack.logging import configure_logging
from sfstack.tasks import build_registry

click.rich_click.USE_MARKDOWN = True
REGISTRY = build_registry()


class TaskGroup(click.RichGroup):
    """Expose every registered task identifier and alias as a subcommand."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return [spec.identifier for spec in REGISTRY]

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        spec = REGISTRY.table.get(cmd_name)
        if spec is None:
            return None
        return _task_command(spec, cmd_name)


def build_dispatcher(settings: Settings) -> TaskDispatcher:
    """Wire the bundled tasks to the real terminal, filesystem and processes."""

    return TaskDispatcher(
        registry=REGISTRY,
        settings=settings,
        runner=SubprocessRunner(),
        prompter=DefaultsPrompter() if settings.no_interaction else ClickPrompter(),
        fs=LocalFileSystem(settings.project_dir),
        console=RichConsole(),
    )


@click.group(cls=TaskGroup)
@click.version_option(version=__version__, prog_name="sfstack")
@click.option(
    "--project-dir",
    type=click.Path(path_type=Path, file_okay=False, exists=True),
    default=None,
    help="Project directory. Defaults to SFSTACK_PROJECT_DIR or the current directory.",
)
@click.option(
    "--env-file",
    default=None,
    help="Docker stack env file. Defaults to SFSTACK_ENV_FILE or .env.docker.",
)
@click.option(
    "-n",
    "--no-interaction",
    is_flag=True,
    default=False,
    help="Answer every question with its default.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
@click.pass_context
def sfstack(
    ctx: click.Context,
    project_dir: Path | None,
    env_file: str | None,
    no_interaction: bool,
    verbose: bool,
) -> None:
    """Symfony project and Docker stack tasks."""

    try:
        settings = Settings.from_env(project_dir=project_dir)
        if env_file is not None:
            settings.env_file = env_file.strip()
        settings.no_interaction = settings.no_interaction or no_interaction
        settings.validate()
    except SettingsError as error:
        raise click.UsageError(str(error)) from error

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = build_dispatcher(settings)


def _task_command(spec: TaskSpec, cmd_name: str) -> click.Command:
    def callback() -> None:
        dispatcher = click.get_current_context().find_object(TaskDispatcher)
        if dispatcher is None:
            raise click.UsageError("No task dispatcher configured.")
        exit_code = dispatcher.invoke(cmd_name)
        if exit_code != 0:
            click.get_current_context().exit(exit_code)

    aliases = [alias for alias in spec.identifiers if alias != cmd_name]
    help_text = spec.description
    if aliases:
        help_text += "\n\nAlso available as: " + ", ".join(f"`{alias}`" for alias in aliases)
    return click.RichCommand(
        cmd_name,
        callback=callback,
        help=help_text,
        short_help=spec.description,
    )


if __name__ == "__main__":  # pragma: no cover
    sfstack()
