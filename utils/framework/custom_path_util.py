from pathlib import Path

DEFAULT_SETTINGS_FILE_NAME = "default_settings.yaml"


def find_project_root(start_path: Path, markers: list[str] | None = None) -> Path:
    """
    Recursively searches for the project root directory by looking for specific marker files.

    Args:
        start_path (Path): The starting path for the search.
        markers (list[str] | None): A list of marker files to identify the project root.

    Returns:
        Path: The path to the project root directory.

    Raises:
        FileNotFoundError: If the project root directory cannot be found.
    """
    if markers is None:
        markers = ["pyproject.toml"]

    current_path = start_path.resolve()

    if any((current_path / marker).exists() for marker in markers):
        return current_path

    if current_path.parent == current_path:
        raise FileNotFoundError("Project root not found.")

    return find_project_root(current_path.parent, markers)


def get_framework_root_path() -> Path:
    """
    Returns the root directory of the framework.

    Returns:
        Path: The root directory of the framework.
    """
    start_path = Path(__file__)
    return find_project_root(start_path)


def get_custom_conf_root_path() -> Path:
    """
    Returns the path to the custom configuration package folder, located next to the utils package
    so it resolves the same way from a source checkout and from an installed distribution.

    Returns:
        Path: The path to the custom configuration folder.
    """
    return Path(__file__).resolve().parents[2] / "custom_conf"


def get_default_settings_path() -> Path:
    """
    Returns the path to the built-in default settings YAML file.
    """
    return get_custom_conf_root_path() / DEFAULT_SETTINGS_FILE_NAME
