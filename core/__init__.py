# core/__init__.py
"""
TRANSPORTDESK Core Module
=========================

Central module providing the ambient services of the application.

Public API:
    - Configuration: Config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .config import Config
from .singleton import SingletonMeta
from .logging_config import LoggingConfig

__all__ = [
    "Config",
    "SingletonMeta",
    "LoggingConfig",
]
