"""
API layer for the SimplyBook bridge.
"""

from .app import create_app

__all__ = [
    "create_app",
]
