"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from fxrates.config.settings import ECB_DAILY_FEED_URL, Settings, settings

__all__ = ["ECB_DAILY_FEED_URL", "Settings", "settings"]
