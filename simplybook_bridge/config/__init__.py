"""
Configuration management for the SimplyBook bridge.
"""

from .settings import Settings, get_settings
from .simplybook import SimplyBookConfig

__all__ = [
    "Settings",
    "get_settings",
    "SimplyBookConfig",
]
