"""New project wizard."""

from __future__ import annotations

from importlib.resources import files

from sfstack.dispatcher import TaskContext, TaskSpec

MODEL_ENV = "MODEL.env"
SKELETON_DIR = "tmp"
README = "README.md"
README_TEMPLATE_COPY = "docs/template/README.md"


def bundled_model_env() -> str:
    """Default stack settings shipped with the package."""

    return (files("sfstack") / "templates" / MODEL_ENV).read_text("utf-8")


def symfony_init(ctx: TaskContext) -> None:
    """Create a Symfony skeleton in the project dir and wire the Docker stack.

    Steps that find their result already present (composer.json, .git,
    templates) are skipped, so the wizard can be re-run on a started project.
    """

    ctx.console.title("Symfony new project wizard")

    if not ctx.exists("composer.json"):
        _create_skeleton(ctx)

    ctx.composer("config", "--json", "extra.symfony.docker", "false")
    _write_stack_env(ctx)

    if not ctx.exists(".git"):
        _init_git(ctx)

    if not ctx.exists("templates"):
        _configure_webapp(ctx)

    _write_readme(ctx)

    project_dir = ctx.settings.project_dir
    ctx.console.success(f"Your new Symfony project is successfully created in {project_dir}")
    ctx.console.info("Run `sfstack` to see all available tasks")
    ctx.console.text(
        [
            "To use Docker:",
            "1. Modify the compose.yml file to setup your Docker stack",
            "2. Run `sfstack docker:start` to start the Docker stack",
        ],
    )
    ctx.console.comment(
        "Feel free to delete compose.yml and .docker/ folder if you don't want to use Docker",
    )


def _create_skeleton(ctx: TaskContext) -> None:
    ctx.console.section("Creating a new Symfony project in the current directory")
    version = ctx.ask("What version of Symfony do you want to use? (default: latest)", "").strip()
    stability = ctx.ask("What stability do you want to use?", "stable").strip() or "stable"
    package = f"symfony/skeleton:{version}" if version else "symfony/skeleton"
    ctx.composer(
        "create-project",
        package,
        SKELETON_DIR,
        f"--stability={stability}",
        "--prefer-dist",
        "--no-progress",
        "--no-interaction",
        "--no-install",
    )
    ctx.fs.copy_tree(SKELETON_DIR, ".")
    ctx.fs.remove_tree(SKELETON_DIR)
    ctx.composer("install", "--prefer-dist", "--no-progress", "--no-interaction")


def _write_stack_env(ctx: TaskContext) -> None:
    target = ctx.settings.env_file
    if ctx.exists(MODEL_ENV):
        ctx.fs.copy(MODEL_ENV, target)
    else:
        ctx.fs.write_text(target, bundled_model_env())


def _init_git(ctx: TaskContext) -> None:
    ctx.console.section("Initializing Git")
    if not ctx.confirm("Do you want to initialize Git in the project?", False):
        return

    ctx.git("init")
    if ctx.confirm("Do you want to add a remote repository?", False):
        remote_url = ctx.ask("What is the remote repository URL?").strip()
        ctx.git("remote", "add", "origin", remote_url)
        ctx.console.new_line()
        ctx.console.info(
            [
                "Git initialized and remote repository added.",
                "You can now push your code to the remote repository.",
            ],
        )
    else:
        ctx.console.new_line()
        ctx.console.info(
            [
                "Git initialized.",
                "You can now add your files and make the first commit.",
            ],
        )

    if ctx.confirm("Do you want to make the first commit?", False):
        ctx.git("add", ".")
        ctx.git("commit", "-m", "Initial commit")


def _configure_webapp(ctx: TaskContext) -> None:
    ctx.console.section("Configuring project as a web application")
    if not ctx.confirm("Do you want to create a web application?", False):
        return

    if not ctx.exists("compose.yml") or not ctx.exists(".docker"):
        if ctx.confirm("Do you want to use Docker?", False):
            ctx.console.section("Creating Docker configuration")
            ctx.composer("config", "--json", "extra.symfony.docker", "true")
    ctx.composer("require", "webapp", "--no-progress", "--no-interaction")


def _write_readme(ctx: TaskContext) -> None:
    heading = f"# {ctx.settings.project_dir.resolve().name}\n"
    if ctx.exists(README):
        ctx.fs.copy(README, README_TEMPLATE_COPY)
    ctx.fs.write_text(README, heading)


TASKS = (
    TaskSpec(
        "project",
        "symfony-init",
        "Create new Symfony project",
        symfony_init,
        aliases=("project:init",),
    ),
)
