"""Doctrine database and migration tasks.

Every command goes through the Symfony console. A failure half-way through
``db:init`` or ``db:reset`` leaves the steps already done in place: a dropped
database stays dropped, a created one stays created.
"""

from __future__ import annotations

from sfstack.dispatcher import TaskContext, TaskSpec

LOAD_FIXTURES_TASK = "fixtures:load-fixtures"


def create_database(ctx: TaskContext) -> None:
    ctx.console.title("Creating new Database")
    ctx.console_command("doctrine:database:create", "--if-not-exists")


def drop_database(ctx: TaskContext) -> None:
    ctx.console.title("Dropping Database")
    ctx.console_command("doctrine:database:drop", "--force", "--if-exists")


def create_migration(ctx: TaskContext) -> None:
    ctx.console.title("Creating new Migration")
    ctx.console_command("make:migration", "--no-interaction")


def run_migrations(ctx: TaskContext) -> None:
    ctx.console.title("Running Migrations")
    ctx.console_command("doctrine:migrations:migrate", "--no-interaction")


def initialize_database(ctx: TaskContext) -> None:
    """Create the database, generate and apply a migration, then offer fixtures."""

    ctx.console.title("Initializing Database")
    ctx.console_command("doctrine:database:create", "--if-not-exists")
    ctx.console_command("make:migration")
    ctx.console_command("doctrine:migrations:migrate")
    fixtures = ctx.ask("Would you like to load fixtures?", "y")
    if fixtures.strip().lower() == "y":
        ctx.call(LOAD_FIXTURES_TASK)
    ctx.console.new_line()
    ctx.console.success("Database initialized")


def reset_database(ctx: TaskContext) -> None:
    """Drop and rebuild the database from a fresh migration."""

    ctx.console.title("Resetting Database")
    confirmed = ctx.confirm(
        "Are you sure you want to reset the database? This will drop and recreate the database.",
        False,
    )
    if not confirmed:
        ctx.console.warning("Database not reset")
        return

    if ctx.exists("migrations"):
        ctx.fs.clear_directory("migrations")
    ctx.console_command("doctrine:database:drop", "--force")
    ctx.console_command("doctrine:database:create")
    ctx.console_command("make:migration")
    ctx.console_command("doctrine:migrations:migrate", "--no-interaction")

    if ctx.exists("src/DataFixtures") and ctx.confirm("Would you like to load fixtures?", False):
        ctx.call(LOAD_FIXTURES_TASK)
    ctx.console.new_line()
    ctx.console.success("Database reset")


TASKS = (
    TaskSpec(
        "database",
        "create-database",
        "Create new Database",
        create_database,
        aliases=("db:create",),
    ),
    TaskSpec("database", "drop-database", "Drop Database", drop_database, aliases=("db:drop",)),
    TaskSpec(
        "database",
        "create-migration",
        "Create new Migration",
        create_migration,
        aliases=("db:migration",),
    ),
    TaskSpec(
        "database",
        "run-migrations",
        "Run Migrations",
        run_migrations,
        aliases=("db:migrate",),
    ),
    TaskSpec(
        "database",
        "initialize-database",
        "Initialize Database",
        initialize_database,
        aliases=("db:init",),
    ),
    TaskSpec(
        "database",
        "reset-database",
        "Reset Database",
        reset_database,
        aliases=("db:reset",),
    ),
)
