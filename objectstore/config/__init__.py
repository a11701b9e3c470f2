"""Configuration module for objectstore."""

from objectstore.config.loader import load_config, get_config_path
from objectstore.config.schema import Config, StoreConfig

__all__ = ["Config", "StoreConfig", "load_config", "get_config_path"]
