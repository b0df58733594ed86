"""Configuration package."""

from food_registration.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
