import os
import re
import sys
from datetime import datetime
from typing import Any

import yaml
from loguru import logger

ENV_REFERENCE = re.compile(r"^\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}$")

_MISSING = object()


def _path_parts(path: str) -> list[str]:
    """'faqsimple:api_key' and 'faqsimple.api_key' both address data['faqsimple']['api_key']"""
    return [part for part in path.replace(":", ".").split(".") if part]


def recursive_update(target: dict, overlay: dict) -> dict:
    """Merge `overlay` into `target` in place; nested dicts are merged, anything else replaced."""
    for key, value in overlay.items():
        current: Any = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            recursive_update(current, value)
        else:
            target[key] = value
    return target


def dotget(data: dict, path: str, default: Any = None) -> Any:
    node: Any = data
    for part in _path_parts(path):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return default if node is None else node


def dotexists(data: dict, path: str) -> bool:
    return dotget(data, path, default=_MISSING) is not _MISSING


def dotset(data: dict, path: str, value: Any) -> dict:
    *parents, leaf = _path_parts(path)
    node: dict = data
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value
    return data


def env2dict(prefix: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Copy environment variables named PREFIX_A_B into data['a']['b'].

    Every underscore after the prefix separates a level, so only keys without
    underscores can be overridden (FAQSIMPLE_MCP_LOGGING_LEVEL -> logging.level).
    """
    data = {} if data is None else data
    if not prefix:
        return data
    marker: str = f"{prefix.lower()}_"
    for name, value in os.environ.items():
        name = name.lower()
        if name.startswith(marker) and len(name) > len(marker):
            dotset(data, name[len(marker) :].replace("_", "."), value)
    return data


def replace_env_vars(data: Any) -> Any:
    """Replace string values that are exactly `${NAME}` with the environment variable NAME ('' when unset)."""
    if isinstance(data, dict):
        return {key: replace_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [replace_env_vars(item) for item in data]
    if isinstance(data, str):
        match: re.Match | None = ENV_REFERENCE.match(data)
        if match:
            return os.getenv(match.group("name"), "")
    return data


def _resolve_sink(sink: Any, folder: str) -> Any:
    if sink == "sys.stderr":
        return sys.stderr
    if sink == "sys.stdout":
        return sys.stdout
    if isinstance(sink, str) and sink.endswith(".log"):
        return os.path.join(folder, f"{datetime.now().strftime('%Y%m%d')}_{sink}")
    return sink


def configure_logging(opts: dict[str, Any] | None = None) -> None:
    """Route loguru output to stderr; stdout is reserved for the MCP stdio transport."""

    opts = opts or {}

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(opts.get("level") or "INFO").upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
    )

    folder: str = opts.get("folder", "logs")
    handlers: list[dict[str, Any]] = [
        {**handler, "sink": _resolve_sink(handler["sink"], folder)} for handler in opts.get("handlers") or [] if handler.get("sink")
    ]

    if handlers:
        logger.configure(handlers=handlers)


def load_resource_yaml(key: str) -> dict[str, Any] | None:
    """Load faqsimple_mcp/resources/<key>.yml, None if there is no such resource."""

    resource_path: str = os.path.join(os.path.dirname(__file__), "resources", f"{key}.yml")
    if not os.path.exists(resource_path):
        return None

    with open(resource_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)
