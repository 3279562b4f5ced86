"""Shared utilities: logging, settings, base models."""

from compat_utils.base import ProfileModel, StrictModel
from compat_utils.logging import get_logger
from compat_utils.settings import Settings, get_settings

__all__ = ["ProfileModel", "Settings", "StrictModel", "get_logger", "get_settings"]
