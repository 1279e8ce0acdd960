from __future__ import annotations

from pathlib import Path

import allure
from conftest import Harness

from sfstack.envfile import load_env
from sfstack.tasks.project import bundled_model_env

pytestmark = [
    allure.epic("Task Catalogue"),
    allure.feature("Project Wizard"),
]

DOCKER_FALSE = ("composer", "config", "--json", "extra.symfony.docker", "false")
DOCKER_TRUE = ("composer", "config", "--json", "extra.symfony.docker", "true")
WEBAPP = ("composer", "require", "webapp", "--no-progress", "--no-interaction")


def _existing_project(project_dir: Path) -> None:
    """Lay out a project where every skippable wizard step is already done."""

    (project_dir / "composer.json").write_text("{}", "utf-8")
    (project_dir / ".git").mkdir()
    (project_dir / "templates").mkdir()


def test_init_on_existing_project_only_refreshes_config(harness: Harness) -> None:
    _existing_project(harness.project_dir)

    assert harness.invoke("project:init") == 0

    assert harness.runner.calls == [DOCKER_FALSE]
    assert harness.prompter.questions == []
    assert (harness.project_dir / "README.md").read_text("utf-8") == "# demo-app\n"
    [success] = harness.console.of_kind("success")
    assert str(harness.project_dir) in success[0]


def test_init_writes_stack_env_from_bundled_template(harness: Harness) -> None:
    _existing_project(harness.project_dir)

    harness.invoke("project:init")

    env_path = harness.project_dir / ".env.docker"
    assert env_path.read_text("utf-8") == bundled_model_env()
    env = load_env(env_path)
    assert env["APP_PORT"] == "8080"
    assert env["MAILPIT_HTTP_PORT"] == "8025"
    assert env["PGADMIN_PORT"] == ""


def test_init_prefers_project_model_env(harness: Harness) -> None:
    _existing_project(harness.project_dir)
    (harness.project_dir / "MODEL.env").write_text("APP_PORT=9000\n", "utf-8")

    harness.invoke("project:init")

    assert load_env(harness.project_dir / ".env.docker") == {"APP_PORT": "9000"}


def test_init_archives_existing_readme(harness: Harness) -> None:
    _existing_project(harness.project_dir)
    (harness.project_dir / "README.md").write_text("# Symfony Docker template\n", "utf-8")

    harness.invoke("project:init")

    archived = harness.project_dir / "docs" / "template" / "README.md"
    assert archived.read_text("utf-8") == "# Symfony Docker template\n"
    assert (harness.project_dir / "README.md").read_text("utf-8") == "# demo-app\n"


def test_init_creates_skeleton_in_empty_directory(harness: Harness) -> None:
    (harness.project_dir / ".git").mkdir()
    (harness.project_dir / "templates").mkdir()
    skeleton = harness.project_dir / "tmp"
    skeleton.mkdir()
    (skeleton / "composer.json").write_text('{"name": "symfony/skeleton"}', "utf-8")
    (skeleton / "config").mkdir()
    (skeleton / "config" / "bundles.php").write_text("<?php", "utf-8")

    assert harness.invoke("project:init", "7.1.*", "") == 0

    assert harness.runner.calls == [
        (
            "composer",
            "create-project",
            "symfony/skeleton:7.1.*",
            "tmp",
            "--stability=stable",
            "--prefer-dist",
            "--no-progress",
            "--no-interaction",
            "--no-install",
        ),
        ("composer", "install", "--prefer-dist", "--no-progress", "--no-interaction"),
        DOCKER_FALSE,
    ]
    assert (harness.project_dir / "composer.json").exists()
    assert (harness.project_dir / "config" / "bundles.php").exists()
    assert not skeleton.exists()


def test_init_latest_version_omits_constraint(harness: Harness) -> None:
    (harness.project_dir / ".git").mkdir()
    (harness.project_dir / "templates").mkdir()
    (harness.project_dir / "tmp").mkdir()
    harness.runner.statuses[
        (
            "composer",
            "create-project",
            "symfony/skeleton",
            "tmp",
            "--stability=dev",
            "--prefer-dist",
            "--no-progress",
            "--no-interaction",
            "--no-install",
        )
    ] = 1

    assert harness.invoke("project:init", "", "dev") == 1
    assert len(harness.runner.calls) == 1
    # Nothing after the failing create-project ran.
    assert not (harness.project_dir / ".env.docker").exists()


def test_init_git_with_remote_and_first_commit(harness: Harness) -> None:
    (harness.project_dir / "composer.json").write_text("{}", "utf-8")
    (harness.project_dir / "templates").mkdir()

    exit_code = harness.invoke(
        "project:init",
        True,
        True,
        "git@example.com:acme/demo-app.git",
        True,
    )

    assert exit_code == 0
    assert harness.runner.calls == [
        DOCKER_FALSE,
        ("git", "init"),
        ("git", "remote", "add", "origin", "git@example.com:acme/demo-app.git"),
        ("git", "add", "."),
        ("git", "commit", "-m", "Initial commit"),
    ]
    assert [
        "Git initialized and remote repository added.",
        "You can now push your code to the remote repository.",
    ] in harness.console.of_kind("info")


def test_init_git_declined(harness: Harness) -> None:
    (harness.project_dir / "composer.json").write_text("{}", "utf-8")
    (harness.project_dir / "templates").mkdir()

    assert harness.invoke("project:init", False) == 0
    assert harness.runner.calls == [DOCKER_FALSE]


def test_init_webapp_with_docker_when_stack_files_missing(harness: Harness) -> None:
    (harness.project_dir / "composer.json").write_text("{}", "utf-8")
    (harness.project_dir / ".git").mkdir()

    assert harness.invoke("project:init", True, True) == 0

    assert harness.runner.calls == [DOCKER_FALSE, DOCKER_TRUE, WEBAPP]


def test_init_webapp_skips_docker_question_when_stack_present(harness: Harness) -> None:
    (harness.project_dir / "composer.json").write_text("{}", "utf-8")
    (harness.project_dir / ".git").mkdir()
    (harness.project_dir / "compose.yml").write_text("services: {}\n", "utf-8")
    (harness.project_dir / ".docker").mkdir()

    assert harness.invoke("project:init", True) == 0

    assert harness.runner.calls == [DOCKER_FALSE, WEBAPP]
    assert "Do you want to use Docker?" not in harness.prompter.questions
