"""Configuration for filesystem roots and external tool names."""

from .paths import AppPaths, get_application_root
from .tool_settings import ToolSettings

__all__ = ["AppPaths", "ToolSettings", "get_application_root"]
