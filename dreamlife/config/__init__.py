"""
Configuration for DreamLife chat.
"""

from dreamlife.config.settings import DreamLifeSettings, settings

__all__ = ["DreamLifeSettings", "settings"]
