from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from faqsimple_mcp.utility import dotexists, dotget, dotset, env2dict, replace_env_vars


class Config:
    """Nested configuration data addressed with 'section:key' paths."""

    def __init__(self, *, data: dict | None = None, filename: str | None = None):
        self.data: dict | None = data
        self.filename: str | None = filename

    def get(self, key: str, default: Any = None, mandatory: bool = False) -> Any:
        if self.data is None:
            raise ValueError("Configuration not initialized")

        value: Any = dotget(self.data, key)
        if value is not None:
            return value

        if mandatory:
            raise ValueError(f"Missing mandatory key: {key}")

        return default() if isinstance(default, type) else default

    def update(self, data: dict[str, Any] | tuple[str, Any]) -> None:
        if self.data is None:
            self.data = {}
        for key, value in [data] if isinstance(data, tuple) else data.items():
            dotset(self.data, key, value)

    def exists(self, key: str) -> bool:
        return self.data is not None and dotexists(self.data, key)


class ConfigFactory:
    """Builds a Config from a YAML file, a YAML string or a dict."""

    def load(self, *, source: str | dict | Config | None = None, env_filename: str | None = None, env_prefix: str | None = None) -> Config:
        """
        Values are resolved in this order:
            1. the source document
            2. PREFIX_SECTION_KEY environment variables (when env_prefix is given)
            3. `${NAME}` references, read from the environment after loading `env_filename`
        """
        load_dotenv(dotenv_path=env_filename)

        if isinstance(source, Config):
            return source

        filename: str | None = source if self.is_config_path(source) else None

        data: Any
        if filename:
            data = yaml.safe_load(Path(filename).read_text(encoding="utf-8"))
        elif isinstance(source, str):
            data = yaml.safe_load(source)
        else:
            data = source

        data = data or {}
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping, found '{type(data).__name__}'")

        return Config(data=replace_env_vars(env2dict(env_prefix, data)), filename=filename)

    @staticmethod
    def is_config_path(source: Any) -> bool:
        """A string ending in .yml/.yaml is a file path; it must exist."""
        if not isinstance(source, str) or not source.endswith((".yml", ".yaml")):
            return False
        if not Path(source).exists():
            raise FileNotFoundError(f"Configuration file not found: {source}")
        return True
