"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from xbmcapi.config.schema import ClientConfig


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".xbmcapi" / "config.json"


def get_data_dir() -> Path:
    """Get the xbmcapi data directory."""
    return Path.home() / ".xbmcapi"


def load_config(config_path: Path | None = None, **overrides: Any) -> ClientConfig:
    """
    Load configuration from file, or defaults when the file is absent.

    Args:
        config_path: Optional path to config file. Uses default if not provided.
        overrides: Field values that take precedence over the file.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path) as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("config file must be a JSON object")
            data = convert_keys(raw)
            allowed = set(ClientConfig.model_fields)
            data = {k: v for k, v in data.items() if k in allowed}
            return ClientConfig(**{**data, **_present(overrides)})
        except ValueError as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e
    return ClientConfig(**_present(overrides))


def _present(overrides: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in overrides.items() if v is not None}


def save_config(config: ClientConfig, config_path: Path | None = None) -> Path:
    """
    Save configuration to file with camelCase keys.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = convert_to_camel(config.model_dump())
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    return path


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
