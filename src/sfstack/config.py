"""Runtime configuration for task execution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class SettingsError(ValueError):
    """Invalid SFSTACK_* configuration value."""


@dataclass(slots=True)
class BinarySettings:
    """External executables invoked by tasks."""

    composer: str = "composer"
    docker: str = "docker"
    symfony: str = "symfony"
    git: str = "git"


@dataclass(slots=True)
class Settings:
    """Application settings for one CLI invocation."""

    project_dir: Path = field(default_factory=Path.cwd)
    env_file: str = ".env.docker"
    binaries: BinarySettings = field(default_factory=BinarySettings)
    no_interaction: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, project_dir: Path | None = None) -> Settings:
        """Load settings from environment with defaults for local development."""

        raw_project_dir = os.getenv("SFSTACK_PROJECT_DIR", "").strip()
        return cls(
            project_dir=project_dir or (Path(raw_project_dir) if raw_project_dir else Path.cwd()),
            env_file=os.getenv("SFSTACK_ENV_FILE", ".env.docker").strip(),
            binaries=BinarySettings(
                composer=os.getenv("SFSTACK_COMPOSER_BIN", "composer").strip(),
                docker=os.getenv("SFSTACK_DOCKER_BIN", "docker").strip(),
                symfony=os.getenv("SFSTACK_SYMFONY_BIN", "symfony").strip(),
                git=os.getenv("SFSTACK_GIT_BIN", "git").strip(),
            ),
            no_interaction=_env_bool("SFSTACK_NO_INTERACTION", default=False),
            log_level=os.getenv("SFSTACK_LOG_LEVEL", "WARNING").strip().upper(),
        )

    def validate(self) -> None:
        """Raise SettingsError on values no task can work with."""

        if not self.env_file:
            raise SettingsError("SFSTACK_ENV_FILE must not be empty.")
        for name in ("composer", "docker", "symfony", "git"):
            if not getattr(self.binaries, name):
                raise SettingsError(f"SFSTACK_{name.upper()}_BIN must not be empty.")
        if self.log_level not in _LOG_LEVELS:
            raise SettingsError(
                f"Invalid SFSTACK_LOG_LEVEL: {self.log_level!r}. "
                f"Expected one of {', '.join(sorted(_LOG_LEVELS))}.",
            )


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off", ""}:
        return False
    raise SettingsError(f"Invalid boolean value for {name}: {value!r}")
