"""
myshell Configuration

Dataclass settings for the interpreter, held by a process-wide
ConfigLoader. Nothing is read from disk: the shell runs on the
defaults below unless an embedding program swaps in its own Config.

Author: YSNRFD
Version: 1.0.0
"""

import threading
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ShellConfig:
    """Interpreter settings."""
    name: str = "myshell"
    prompt: str = "> "
    line_buffer_size: int = 1024
    line_buffer_step: int = 1024
    token_buffer_size: int = 64
    token_buffer_step: int = 64
    exit_on_eof: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the interpreter.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Holder of the process-wide configuration.

    Example:
        >>> ConfigLoader().config.shell.prompt
        '> '
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
            return cls._instance

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @config.setter
    def config(self, value: Config) -> None:
        self._config = value


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
