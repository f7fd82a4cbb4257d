"""Configuration package."""

from .app_config import AppConfig, get_app_config  # noqa: F401
