import os
from typing import Any, Dict

ENV_VAR_PREFIX = "CALC_"
INT_SETTINGS = ("operand_a", "operand_b")
BOOL_SETTINGS = ("log_to_file",)
TRUE_VALUES = ("1", "true", "yes", "on")


def load_env_vars(prefix: str = ENV_VAR_PREFIX) -> Dict[str, str]:
    """
    Load settings from environment variables prefixed with the provided prefix
    The prefix is stripped and the remaining name lower-cased, so CALC_LOG_LEVEL becomes log_level

    Args:
        prefix (str): The prefix to filter environment variables (default is 'CALC_')

    Returns:
        Dict[str, str]: A dictionary of settings loaded from environment variables
    """
    return {
        key[len(prefix):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }


def validate_known_keys(default_settings: Dict[str, Any], new_settings: Dict[str, Any], source: str) -> None:
    """
    Reject settings keys that the default template does not define

    Args:
        default_settings (dict): The built-in default settings
        new_settings (dict): Settings about to be layered on top
        source (str): Where the new settings came from, used in the error message

    Raises:
        ValueError: If new_settings holds a key missing from default_settings
    """
    unknown_keys = sorted(new_settings.keys() - default_settings.keys())
    if unknown_keys:
        raise ValueError(f"Unknown setting(s) in {source}: {', '.join(unknown_keys)}")


def drop_unset_values(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Remove entries whose value is None, used for CLI overrides that were not provided
    """
    return {key: value for key, value in settings.items() if value is not None}


def coerce_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert raw setting values (strings from env vars or files) into their expected types

    Args:
        settings (dict): Settings with raw values

    Returns:
        dict: A new dictionary with operands as int and flags as bool

    Raises:
        ValueError: If an operand cannot be converted to an integer
    """
    coerced = dict(settings)

    for key in INT_SETTINGS:
        if key in coerced:
            coerced[key] = to_int_setting(key, coerced[key])

    for key in BOOL_SETTINGS:
        value = coerced.get(key)
        if isinstance(value, str):
            coerced[key] = value.strip().lower() in TRUE_VALUES

    return coerced


def to_int_setting(key: str, value: Any) -> int:
    """
    Convert a single setting to int, rejecting floats and booleans

    Raises:
        ValueError: If the value is not an integer or an integer string
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"Setting '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Setting '{key}' must be an integer, got {value!r}") from e
