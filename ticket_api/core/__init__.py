"""Configuration and logging for the Ticket API."""

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
