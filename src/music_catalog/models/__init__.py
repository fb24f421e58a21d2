"""Data models for music catalog."""

from .config import Config, StoreConfig, EventConfig, load_config, save_config, create_default_config

__all__ = ["Config", "StoreConfig", "EventConfig", "load_config", "save_config", "create_default_config"]
