from typing import Any


def layer_dicts(*layers: dict[str, Any] | None) -> dict[str, Any]:
    """
    Layer dictionaries on top of each other, later layers win and None layers are skipped

    Args:
        *layers (dict[str, Any] | None): Dictionaries ordered from lowest to highest precedence

    Returns:
        dict[str, Any]: A new dictionary holding the layered result

    Examples:
        >>> layer_dicts({"a": 1, "b": 2}, None, {"b": 3})
        {'a': 1, 'b': 3}

        >>> layer_dicts()
        {}
    """
    result = {}
    for layer in layers:
        if layer is None:
            continue
        if not isinstance(layer, dict):
            raise TypeError(f"Expected a dict layer, got {type(layer).__name__}")
        result.update(layer)
    return result
