from .config import Config, ConfigFactory
from .inject import (
    ConfigProvider,
    ConfigStore,
    ConfigValue,
    MockConfigProvider,
    SingletonConfigProvider,
    get_config_provider,
    reset_config_provider,
    set_config_provider,
)
from .setup import load_client_settings, setup_config_store
