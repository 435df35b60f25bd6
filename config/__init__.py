"""
Configuration module for the email generation service.
Exports the settings singleton and its accessor.
"""

from config.settings import settings, get_settings

__all__ = ["settings", "get_settings"]
