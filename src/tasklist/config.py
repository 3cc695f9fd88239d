from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from tasklist.exceptions import ConfigError

DEFAULT_STORE_PATH = Path("todos.txt")


class TaskListConfig(BaseModel):
    """Configuration for a task list session."""

    store_path: Path = Field(
        default=DEFAULT_STORE_PATH,
        description="Task file location; relative paths resolve against the working directory",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of the task file")

    def resolved_store_path(self) -> Path:
        return self.store_path.expanduser().absolute()


def load_config(path: str | Path) -> TaskListConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to a YAML mapping with ``store_path`` and/or ``encoding``.

    Returns:
        Validated TaskListConfig. An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read config: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    try:
        return TaskListConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config: {exc}") from exc
