import json
from pathlib import Path
from typing import Any

import yaml


def read_settings_file(file_path: str | Path) -> dict[str, Any]:
    """
    Read a JSON or YAML settings file, chosen by extension, into a dictionary

    Args:
        file_path (str | Path): Path to the settings file

    Returns:
        dict[str, Any]: Parsed settings, empty for an empty YAML document

    Raises:
        TypeError: If the input is not a string or Path object
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is unsupported, cannot be parsed, or is not a mapping

    Examples:
        >>> read_settings_file("settings.yaml")
        {'log_level': 'DEBUG'}
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    with path.open("r", encoding="utf-8") as file:
        match path.suffix.lower():
            case ".json":
                try:
                    data = json.load(file)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON file: {file_path}") from e
            case ".yaml" | ".yml":
                try:
                    data = yaml.safe_load(file)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML file: {file_path}") from e
            case _:
                raise ValueError(f"Unsupported file type: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {file_path}")
    return data
