"""Docker compose stack tasks."""

from __future__ import annotations

from collections.abc import Mapping

from sfstack.dispatcher import TaskContext, TaskSpec
from sfstack.envfile import EnvScalar

# Port variable -> how the service is named in the summary.
STACK_SERVICES: tuple[tuple[str, str], ...] = (
    ("APP_PORT", "your Symfony application"),
    ("PHPMYADMIN_PORT", "PHPMyAdmin"),
    ("PGADMIN_PORT", "PgAdmin"),
    ("MAILPIT_HTTP_PORT", "Mailpit"),
)


def stack_urls(env: Mapping[str, EnvScalar], host: str = "localhost") -> list[str]:
    """One access message per service whose port is set to a non-empty value."""

    messages: list[str] = []
    for variable, service in STACK_SERVICES:
        port = env.get(variable)
        if port is None or str(port).strip() == "":
            continue
        messages.append(f"You can now access {service} at http://{host}:{port}")
    return messages


def _show_stack_urls(ctx: TaskContext) -> None:
    messages = stack_urls(ctx.load_env(ctx.settings.env_file))
    if messages:
        ctx.console.info(messages)


def docker_start(ctx: TaskContext) -> None:
    ctx.console.title("Starting Docker Stack")
    ctx.compose("up", "-d")
    ctx.console.new_line()
    ctx.console.success("Docker Stack started")
    _show_stack_urls(ctx)


def docker_stop(ctx: TaskContext) -> None:
    ctx.console.title("Stopping Docker Stack")
    ctx.compose("stop")
    ctx.console.new_line()
    ctx.console.success("Docker Stack stopped")


def docker_restart(ctx: TaskContext) -> None:
    ctx.console.title("Restarting Docker Stack")
    ctx.compose("restart")
    ctx.console.new_line()
    ctx.console.success("Docker Stack restarted")
    _show_stack_urls(ctx)


def docker_remove(ctx: TaskContext) -> None:
    """Tear down the services of compose.yml, optionally with their volumes."""

    ctx.console.title("Removing Docker Stack")
    ctx.console.info("This will remove all services defined in the compose.yml file.")
    if not ctx.confirm("Are you sure you want to remove this Docker Stack?", False):
        ctx.console.warning("Docker Stack not removed")
        return

    if ctx.confirm("Do you want to remove volumes too?", False):
        ctx.compose("down", "--volumes")
        ctx.console.new_line()
        ctx.console.success("Docker Stack and volumes removed")
    else:
        ctx.compose("down")
        ctx.console.new_line()
        ctx.console.success("Docker Stack removed")


def docker_clean(ctx: TaskContext) -> None:
    """Prune unused images, containers and networks, optionally volumes."""

    ctx.console.title("Cleaning Docker Environment")
    ctx.console.info("This will remove all unused Docker images, containers and networks.")
    if not ctx.confirm("Are you sure you want to clean the Docker Environment?", False):
        ctx.console.warning("Docker Environment not cleaned")
        return

    command = ["system", "prune", "-a", "-f"]
    if ctx.confirm("Do you want to remove unused Docker volumes too?", False):
        command.append("--volumes")
    ctx.docker(*command)
    ctx.console.new_line()
    ctx.console.success("Docker Environment cleaned")


TASKS = (
    TaskSpec("docker", "docker-start", "Start Docker Stack", docker_start, aliases=("docker:start",)),
    TaskSpec("docker", "docker-stop", "Stop Docker Stack", docker_stop, aliases=("docker:stop",)),
    TaskSpec(
        "docker",
        "docker-restart",
        "Restart Docker Stack",
        docker_restart,
        aliases=("docker:restart",),
    ),
    TaskSpec(
        "docker",
        "docker-remove",
        "Remove Docker Stack",
        docker_remove,
        aliases=("docker:remove",),
    ),
    TaskSpec(
        "docker",
        "docker-clean",
        "Clean Docker Environment",
        docker_clean,
        aliases=("docker:clean",),
    ),
)
