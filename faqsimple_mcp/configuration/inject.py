import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Self

from .config import Config, ConfigFactory

# pylint: disable=global-statement


class ConfigProvider(ABC):
    """Where ConfigValue looks up configuration; swapped out in tests"""

    @abstractmethod
    def get_config(self) -> Config: ...

    @abstractmethod
    def is_configured(self) -> bool: ...


class SingletonConfigProvider(ConfigProvider):
    """Reads the process-wide ConfigStore"""

    def get_config(self) -> Config:
        return ConfigStore.get_instance().config()

    def is_configured(self) -> bool:
        return ConfigStore.get_instance().is_configured()


class MockConfigProvider(ConfigProvider):
    """Serves a fixed Config"""

    def __init__(self, config: Config):
        self._config: Config = config

    def get_config(self) -> Config:
        return self._config

    def is_configured(self) -> bool:
        return self._config is not None


_current_provider: ConfigProvider = SingletonConfigProvider()
_provider_lock = threading.Lock()


def get_config_provider() -> ConfigProvider:
    return _current_provider


def set_config_provider(provider: ConfigProvider) -> ConfigProvider:
    """Install `provider` and return the one it replaces"""
    global _current_provider
    with _provider_lock:
        previous, _current_provider = _current_provider, provider
    return previous


def reset_config_provider() -> None:
    set_config_provider(SingletonConfigProvider())


@dataclass
class ConfigValue:
    """A configuration key resolved lazily against the current provider"""

    key: str
    default: Any = None
    mandatory: bool = False

    @property
    def value(self) -> Any:
        return self.resolve()

    def resolve(self) -> Any:
        return get_config_provider().get_config().get(self.key, default=self.default, mandatory=self.mandatory and self.default is None)


class ConfigStore:
    """Process-wide holder of the active Config"""

    _instance: "ConfigStore | None" = None
    _lock = threading.Lock()

    def __init__(self):
        if ConfigStore._instance is not None:
            raise RuntimeError("ConfigStore is a singleton. Use get_instance()")
        self._config: Config | None = None

    @classmethod
    def get_instance(cls) -> Self:
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
        reset_config_provider()

    def is_configured(self) -> bool:
        return isinstance(self._config, Config)

    def config(self) -> Config:
        if self._config is None:
            raise ValueError("Config Store not properly initialized")
        return self._config

    def configure(
        self,
        *,
        source: Config | str | dict[str, Any],
        env_filename: str | None = None,
        env_prefix: str | None = None,
    ) -> Config:
        self._config = ConfigFactory().load(source=source, env_filename=env_filename, env_prefix=env_prefix)
        return self._config
