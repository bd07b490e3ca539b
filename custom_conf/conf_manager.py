from threading import Lock
from typing import Any

from utils.common.dict_util import layer_dicts


class ConfManager:
    """
    ConfManager is responsible for managing configuration settings in a thread-safe way
    It allows loading, retrieving, updating, and clearing configuration settings
    """

    def __init__(self) -> None:
        """
        Initialize the ConfManager with an empty settings dictionary and a lock for thread safety
        """
        self.settings: dict[str, Any] = {}
        self._lock = Lock()

    def load(self, new_settings: dict[str, Any]) -> None:
        """
        Layer new settings on top of the current ones, keys already present are overridden

        Args:
            new_settings (dict[str, Any]): Settings to layer on top
        """
        with self._lock:
            self.settings = layer_dicts(self.settings, new_settings)

    def get_settings(self, key: str, default: Any = None) -> Any:
        """
        Retrieve a setting by key. If the key doesn't exist, return the default value (None by default)

        Args:
            key (str): The key of the setting to retrieve
            default (Any): The default value to return if the key is not found

        Returns:
            Any: The value of the setting or the default value if the key is not found
        """
        with self._lock:
            return self.settings.get(key, default)

    def set_settings(self, key: str, value: Any) -> None:
        """
        Set a new key-value pair in the settings

        Args:
            key (str): The key of the setting to add or update
            value (Any): The value of the setting to store
        """
        with self._lock:
            self.settings[key] = value

    def snapshot(self) -> dict[str, Any]:
        """
        Return a shallow copy of all settings, safe to log or iterate
        """
        with self._lock:
            return dict(self.settings)

    def clear(self) -> None:
        """
        Clear all settings from the configuration manager
        """
        with self._lock:
            self.settings.clear()
