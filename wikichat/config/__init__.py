"""Configuration module for wikichat."""

from wikichat.config.loader import get_config_path, load_config
from wikichat.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
