"""
Configuration Module

Application configuration settings and the seed catalog.
"""

from healthplus.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
