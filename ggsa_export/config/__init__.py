"""
Configuration module for the GGSA export.
"""
from .settings import (
    ExportSettings,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'ExportSettings',
    'get_config',
    'load_config',
    'reload_config'
]
