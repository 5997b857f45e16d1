import os
from typing import Any

import dotenv
from loguru import logger

from faqsimple_mcp.api.errors import ConfigError
from faqsimple_mcp.models import DEFAULT_BASE_URL, DEFAULT_CACHE_TIMEOUT, DEFAULT_RATE_LIMIT_DELAY, DEFAULT_TIMEOUT, ClientSettings
from faqsimple_mcp.utility import configure_logging, load_resource_yaml, recursive_update

from .config import Config, ConfigFactory
from .inject import ConfigStore, ConfigValue

ENV_PREFIX = "FAQSIMPLE_MCP"


def load_config_source(filename: str | None) -> dict[str, Any]:
    """Bundled defaults overlaid with the user's YAML file, if there is one"""
    data: dict[str, Any] = load_resource_yaml("config") or {}
    if filename and os.path.exists(filename):
        user_config: Config = ConfigFactory().load(source=filename)
        data = recursive_update(data, user_config.data or {})
    return data


async def setup_config_store(filename: str = "config.yml") -> None:

    env_file: str = os.getenv("ENV_FILE", ".env")
    dotenv.load_dotenv(dotenv_path=env_file)

    config_file: str = os.getenv("CONFIG_FILE", filename)
    store: ConfigStore = ConfigStore.get_instance()

    if store.is_configured():
        return

    cfg: Config = store.configure(source=load_config_source(config_file), env_filename=env_file, env_prefix=ENV_PREFIX)

    cfg.update({"runtime:config_file": config_file})

    configure_logging(cfg.get("logging") or {})

    logger.info("Config Store initialized successfully.")


def _as_number(key: str, value: Any, default: int | float, cast: type = int) -> int | float:
    if value in (None, ""):
        return default
    try:
        number: int | float = cast(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric value {value!r} for {key}, using {default}")
        return default
    if not number > 0:  # also rejects nan
        logger.warning(f"Ignoring non-positive value {value!r} for {key}, using {default}")
        return default
    return number


def load_client_settings() -> ClientSettings:
    """Build client settings from the configured store"""

    api_key: str = ConfigValue("faqsimple:api_key", default="").resolve()
    if not api_key:
        raise ConfigError("FAQSIMPLE_API_KEY environment variable is required")

    return ClientSettings(
        api_key=api_key,
        base_url=ConfigValue("faqsimple:api_base").resolve() or DEFAULT_BASE_URL,
        cache_timeout=_as_number("cache_timeout", ConfigValue("faqsimple:cache_timeout").resolve(), DEFAULT_CACHE_TIMEOUT),
        rate_limit_delay=_as_number("rate_limit_delay", ConfigValue("faqsimple:rate_limit_delay").resolve(), DEFAULT_RATE_LIMIT_DELAY),
        timeout=_as_number("timeout", ConfigValue("faqsimple:timeout").resolve(), DEFAULT_TIMEOUT, cast=float),
    )
