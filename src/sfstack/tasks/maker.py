"""Code generation through the Symfony Maker Bundle."""

from __future__ import annotations

from sfstack.dispatcher import TaskBody, TaskContext, TaskSpec


def install_maker_bundle(ctx: TaskContext) -> None:
    ctx.console.title("Installing Maker Bundle")
    ctx.composer("require", "--dev", "symfony/maker-bundle")
    ctx.console.new_line()
    ctx.console.success("Maker Bundle installed")


def _maker(subject: str) -> TaskBody:
    """Build a body that runs the interactive ``make:<subject>`` generator."""

    def body(ctx: TaskContext) -> None:
        ctx.console.title(f"Creating new {subject.capitalize()}")
        ctx.console_command(f"make:{subject}")

    body.__name__ = f"make_{subject}"
    return body


make_controller = _maker("controller")
make_user = _maker("user")
make_entity = _maker("entity")
make_form = _maker("form")

TASKS = (
    TaskSpec(
        "maker",
        "install-maker-bundle",
        "Install Maker Bundle",
        install_maker_bundle,
        aliases=("make:install",),
    ),
    TaskSpec(
        "maker",
        "make-controller",
        "Create new Controller",
        make_controller,
        aliases=("make:controller",),
    ),
    TaskSpec("maker", "make-user", "Create new User", make_user, aliases=("make:user",)),
    TaskSpec("maker", "make-entity", "Create new Entity", make_entity, aliases=("make:entity",)),
    TaskSpec("maker", "make-form", "Create new Form", make_form, aliases=("make:form",)),
)
