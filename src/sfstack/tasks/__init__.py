"""Task catalogue of the Symfony Docker template."""

from sfstack.dispatcher import TaskRegistry, TaskSpec
from sfstack.tasks import composer, database, docker, env, fixtures, maker, project, symfony

ALL_TASKS: tuple[TaskSpec, ...] = (
    *env.TASKS,
    *project.TASKS,
    *composer.TASKS,
    *docker.TASKS,
    *symfony.TASKS,
    *maker.TASKS,
    *database.TASKS,
    *fixtures.TASKS,
)


def build_registry() -> TaskRegistry:
    """Registry of every bundled task, frozen."""

    return TaskRegistry(ALL_TASKS).freeze()


__all__ = ["ALL_TASKS", "build_registry"]
