from pathlib import Path
from typing import Any

from custom_conf.conf_manager import ConfManager
from helpers.help_custom_conf.help_initialize_config import \
    HelpInitializeConfig
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger(__name__)


class ConfigInitializer:
    def __init__(
            self,
            settings_path: str | Path | None = None,
            detect_env_vars: bool = True,
            overrides: dict[str, Any] | None = None
    ) -> None:
        """
        Initialize the ConfigInitializer with the optional settings sources

        Args:
            settings_path (str | Path | None): Optional JSON or YAML settings file
            detect_env_vars (bool): Flag to enable CALC_ environment variable detection
            overrides (dict[str, Any] | None): Highest precedence values, typically from the CLI
        """
        self.params = {
            "settings_path": settings_path,
            "detect_env_vars": detect_env_vars,
            "overrides": overrides or {},
        }

        self.conf_manager = ConfManager()

    def initialize(self) -> ConfManager:
        """
        Initialize the configuration using the HelpInitializeConfig helper class
        Sources are layered as defaults, settings file, environment variables, then overrides

        Returns:
            ConfManager: The ConfManager instance with loaded configuration settings
        """
        helper = HelpInitializeConfig(self.conf_manager, self.params)
        conf_manager = helper.initialize()
        LOGGER.debug(f"Configuration initialized: {conf_manager.snapshot()}")
        return conf_manager
