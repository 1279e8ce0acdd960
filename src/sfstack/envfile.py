"""Flat ``KEY=VALUE`` config files shared with docker compose."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

EnvScalar = str | int | float | bool | None

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+(?=[eE]))([eE][+-]?\d+)?$")
_QUOTE_CHARS = ("'", '"')


class ConfigNotFoundError(FileNotFoundError):
    """Config file path does not reference an existing file."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f'The file "{path}" does not exist.')
        self.path = Path(path)


class ConfigDecodeError(ValueError):
    """Config file exists but is not UTF-8 text."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f'The file "{path}" is not valid UTF-8 text.')
        self.path = Path(path)


def load_env(path: Path | str, *, typed: bool = False) -> dict[str, EnvScalar]:
    """Read a config file into an ordered mapping.

    Raises ConfigNotFoundError when ``path`` is not an existing file and
    ConfigDecodeError when it does not hold UTF-8 text.
    """

    env_path = Path(path)
    if not env_path.is_file():
        raise ConfigNotFoundError(env_path)
    try:
        text = env_path.read_text("utf-8")
    except UnicodeDecodeError as error:
        raise ConfigDecodeError(env_path) from error
    return parse_env(text, typed=typed)


def parse_env(text: str, *, typed: bool = False) -> dict[str, EnvScalar]:
    """Parse config text into a mapping in file order.

    Blank lines and ``#`` comments are ignored. Lines without ``=`` or with an
    empty key are skipped. A repeated key keeps its first position and takes
    the last value. ``$`` references are not expanded.
    """

    values: dict[str, EnvScalar] = {}
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, raw_value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug("Skipping malformed config line %d: %r", line_no, raw_line)
            continue
        value = raw_value.strip()
        unquoted = _strip_quotes(value)
        if unquoted is not None:
            values[key] = unquoted
        elif typed:
            values[key] = coerce_scalar(value)
        else:
            values[key] = value
    return values


def coerce_scalar(raw: str) -> EnvScalar:
    """Map a raw unquoted value to bool, int, float or None where it is literal."""

    if not raw:
        return None
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    if _INT_RE.match(raw):
        return int(raw)
    if _FLOAT_RE.match(raw):
        return float(raw)
    return raw


def dump_env(values: Mapping[str, EnvScalar]) -> str:
    """Render a mapping in the flat-file format, one line per key."""

    lines = [f"{key}={_format_value(value)}" for key, value in values.items()]
    return "\n".join(lines) + "\n" if lines else ""


def write_env(path: Path | str, values: Mapping[str, EnvScalar]) -> Path:
    env_path = Path(path)
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(dump_env(values), "utf-8")
    return env_path


def _strip_quotes(value: str) -> str | None:
    if len(value) >= 2 and value[0] in _QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return None


def _format_value(value: EnvScalar) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if any(char.isspace() or char == "#" for char in text):
        return f'"{text}"'
    return text
