"""Configuration module for sqlcsv."""

from .config_loader import ConfigLoader
from .tool_config import ToolConfig

__all__ = ["ConfigLoader", "ToolConfig"]
