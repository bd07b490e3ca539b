from typing import Any, Dict

from custom_conf.conf_manager import ConfManager
from utils.common.file_util import read_settings_file
from utils.framework.custom_conf_util import (coerce_settings,
                                              drop_unset_values,
                                              load_env_vars,
                                              validate_known_keys)
from utils.framework.custom_logger_util import get_logger
from utils.framework.custom_path_util import get_default_settings_path

LOGGER = get_logger(__name__)


class HelpInitializeConfig:
    def __init__(self, conf_manager: ConfManager, params: Dict[str, Any]):
        self.conf_manager = conf_manager
        self.params = params
        self.default_settings: Dict[str, Any] = {}

    def initialize(self) -> ConfManager:

        self._load_default_settings()

        if self.params.get("settings_path"):
            self._load_settings_file()

        if self.params.get("detect_env_vars"):
            self._load_env_vars()

        self._load_overrides()

        return self.conf_manager

    def _load_default_settings(self) -> None:
        self.default_settings = read_settings_file(get_default_settings_path())
        self.conf_manager.load(coerce_settings(self.default_settings))

    def _load_settings_file(self) -> None:
        settings_path = self.params["settings_path"]
        LOGGER.info(f"Loading settings file: {settings_path}")
        file_settings = read_settings_file(settings_path)
        self._layer("settings file", file_settings)

    def _load_env_vars(self) -> None:
        env_settings = load_env_vars()
        if not env_settings:
            LOGGER.debug("No CALC_ environment variables detected")
            return

        # unrelated CALC_ variables are ignored rather than rejected
        known_settings = {key: value for key, value in env_settings.items() if key in self.default_settings}
        LOGGER.debug(f"Loaded environment settings: {sorted(known_settings)}")
        self.conf_manager.load(coerce_settings(known_settings))

    def _load_overrides(self) -> None:
        overrides = drop_unset_values(self.params.get("overrides") or {})
        validate_known_keys(self.default_settings, overrides, "overrides")

        for key, value in coerce_settings(overrides).items():
            LOGGER.debug(f"Setting overridden: {key}")
            self.conf_manager.set_settings(key, value)

    def _layer(self, source: str, settings: Dict[str, Any]) -> None:
        validate_known_keys(self.default_settings, settings, source)
        self.conf_manager.load(coerce_settings(settings))
