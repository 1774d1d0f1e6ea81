"""Configuration loading for the schedule console."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import sys


_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_TITLE = "Astronaut Daily Schedule"


@dataclass(frozen=True, slots=True)
class ShellConfig:
    """Runtime configuration for the console shell and its conflict observers."""

    notifiers: tuple[str, ...] = ("console",)
    enable_bell: bool = False
    log_level: str = "INFO"
    title: str = DEFAULT_TITLE
    env_file: str = ".env"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_shell_config(env_file: str = ".env") -> ShellConfig:
    """Load console config from env file with safe parsing defaults."""

    env = _parse_env_file(env_file)

    notifiers = _env_list(env, "SCHEDULE_NOTIFIERS", default=("console",))
    enable_bell = _env_bool(env, "SCHEDULE_BELL", default=False)
    log_level = _env_log_level(env, "SCHEDULE_LOG_LEVEL", default="INFO")
    title = env.get("SCHEDULE_TITLE", DEFAULT_TITLE).strip() or DEFAULT_TITLE

    return ShellConfig(
        notifiers=notifiers,
        enable_bell=enable_bell,
        log_level=log_level,
        title=title,
        env_file=env_file,
    )


def _warn_env(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr)


def _parse_env_file(path: str) -> dict[str, str]:
    env_path = Path(path)
    if not env_path.exists():
        return {}

    env: dict[str, str] = {}
    for lineno, line in enumerate(env_path.read_text(encoding="utf-8").splitlines(), start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        if text.startswith("export "):
            text = text[7:].strip()
        if "=" not in text:
            _warn_env(f"Ignoring invalid env line {lineno} in {path!r}: {line!r}")
            continue

        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]

        if key:
            env[key] = value

    return env


def _env_bool(env: dict[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _warn_env(f"{key} must be a boolean, got {raw!r}. Using {default}.")
    return default


def _env_list(env: dict[str, str], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    items = tuple(item.strip().lower() for item in raw.split(",") if item.strip())
    return items or default


def _env_log_level(env: dict[str, str], key: str, default: str) -> str:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    value = raw.strip().upper()
    if value not in LOG_LEVELS:
        _warn_env(f"{key} must be one of {list(LOG_LEVELS)}, got {raw!r}. Using {default}.")
        return default
    return value
