"""Shared configuration utilities."""

import os
from pathlib import Path
from typing import TypeVar, Callable, Generic

import yaml

T = TypeVar('T')


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Resolve a config name or path to an existing YAML file.

    A bare name maps to ``<config_dir>/<name>.yaml``; anything that looks like
    a path (contains a slash or ends in .yaml/.yml) is used as given. With no
    name, ``env_var`` is consulted before ``default_name``.

    Raises:
        FileNotFoundError: If the resolved file does not exist.
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if "/" in config_name or config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ConfigSingleton(Generic[T]):
    """Holds one lazily loaded config instance per stage.

    Stage modules expose the bound methods as module-level
    ``get_config`` / ``set_config`` / ``reset_config``; the CLI calls
    ``set_config`` once and stage code that is not handed a config reads
    it back through ``get_config``.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Return the held config, loading it on first use."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Replace the held config."""
        self._config = config

    def reset(self) -> None:
        """Drop the held config so the next get() reloads it."""
        self._config = None
