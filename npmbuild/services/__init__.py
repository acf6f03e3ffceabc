"""
Services package.
"""

from .config_service import CONFIG_PATH_ENV, LOCAL_CONFIG_FILENAME, ConfigService

__all__ = [
    "CONFIG_PATH_ENV",
    "LOCAL_CONFIG_FILENAME",
    "ConfigService",
]
