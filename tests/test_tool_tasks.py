from __future__ import annotations

import allure
import pytest
from conftest import Harness

from sfstack.tasks import ALL_TASKS, build_registry

pytestmark = [
    allure.epic("Task Catalogue"),
    allure.feature("Tool Wrappers"),
]


@pytest.mark.parametrize(
    ("identifier", "expected_call", "title"),
    [
        ("comp:install", ("composer", "install"), "Installing composer dependencies"),
        ("sf:cc", ("symfony", "console", "cache:clear"), "Clearing Cache"),
        (
            "make:install",
            ("composer", "require", "--dev", "symfony/maker-bundle"),
            "Installing Maker Bundle",
        ),
        (
            "make:controller",
            ("symfony", "console", "make:controller"),
            "Creating new Controller",
        ),
        ("make:user", ("symfony", "console", "make:user"), "Creating new User"),
        ("make:entity", ("symfony", "console", "make:entity"), "Creating new Entity"),
        ("make:form", ("symfony", "console", "make:form"), "Creating new Form"),
    ],
)
def test_wrapper_task_runs_one_command(
    harness: Harness,
    identifier: str,
    expected_call: tuple[str, ...],
    title: str,
) -> None:
    assert harness.invoke(identifier) == 0

    assert harness.runner.calls == [expected_call]
    assert harness.console.of_kind("title") == [[title]]


def test_wrapper_task_propagates_tool_status(harness: Harness) -> None:
    harness.runner.statuses[("composer", "install")] = 2

    assert harness.invoke("composer:composer-install") == 2
    assert harness.console.of_kind("success") == []


def test_configured_binaries_are_used(harness: Harness) -> None:
    harness.dispatcher.settings.binaries.composer = "/opt/bin/composer.phar"
    harness.dispatcher.settings.binaries.symfony = "sf"

    harness.invoke("comp:install")
    harness.invoke("sf:cc")

    assert harness.runner.calls == [
        ("/opt/bin/composer.phar", "install"),
        ("sf", "console", "cache:clear"),
    ]


def test_env_show_prints_loaded_variables(harness: Harness) -> None:
    (harness.project_dir / ".env").write_text(
        "APP_ENV=dev\n# comment\nAPP_SECRET='abc'\n",
        "utf-8",
    )

    assert harness.invoke("env:show", ".env") == 0

    assert harness.console.of_kind("table") == [["APP_ENV | dev", "APP_SECRET | abc"]]
    assert harness.runner.calls == []


def test_env_show_missing_file(harness: Harness) -> None:
    assert harness.invoke("env:show-env", "config/.env.missing") == 1
    assert len(harness.console.of_kind("error")) == 1


def test_env_show_directory_path_returns_status_one(harness: Harness) -> None:
    (harness.project_dir / "config").mkdir()

    assert harness.invoke("env:show", "config") == 1
    assert harness.console.of_kind("error") == [
        [f'The file "{harness.project_dir / "config"}" does not exist.'],
    ]


def test_env_show_non_utf8_file_returns_status_one(harness: Harness) -> None:
    (harness.project_dir / ".env").write_bytes(b"APP_NAME=caf\xe9\n")

    assert harness.invoke("env:show", ".env") == 1
    [error] = harness.console.of_kind("error")
    assert "is not valid UTF-8" in error[0]


def test_catalogue_identifiers_and_aliases() -> None:
    registry = build_registry()

    assert registry.frozen
    assert len(registry) == len(ALL_TASKS) == 22
    assert {spec.identifier: spec.aliases for spec in registry} == {
        "env:show-env": ("env:show",),
        "project:symfony-init": ("project:init",),
        "composer:composer-install": ("comp:install",),
        "docker:docker-start": ("docker:start",),
        "docker:docker-stop": ("docker:stop",),
        "docker:docker-restart": ("docker:restart",),
        "docker:docker-remove": ("docker:remove",),
        "docker:docker-clean": ("docker:clean",),
        "symfony:clear-cache": ("sf:cc",),
        "maker:install-maker-bundle": ("make:install",),
        "maker:make-controller": ("make:controller",),
        "maker:make-user": ("make:user",),
        "maker:make-entity": ("make:entity",),
        "maker:make-form": ("make:form",),
        "database:create-database": ("db:create",),
        "database:drop-database": ("db:drop",),
        "database:create-migration": ("db:migration",),
        "database:run-migrations": ("db:migrate",),
        "database:initialize-database": ("db:init",),
        "database:reset-database": ("db:reset",),
        "fixtures:install-fixtures": ("fixt:install",),
        "fixtures:load-fixtures": ("fixt:load",),
    }
