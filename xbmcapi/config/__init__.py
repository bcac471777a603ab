"""Configuration module for xbmcapi."""

from xbmcapi.config.loader import load_config, get_config_path, save_config
from xbmcapi.config.schema import ClientConfig

__all__ = ["ClientConfig", "load_config", "get_config_path", "save_config"]
