"""
myshell Core Module

Configuration shared by every subsystem.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    LoggingConfig,
    ShellConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'LoggingConfig',
    'ShellConfig',
    'get_config',
]
