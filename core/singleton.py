"""
singleton.py — TRANSPORTDESK
=============================
Single source of truth for the Singleton pattern in the project.

    class MyService(metaclass=SingletonMeta): ...
    MyService()

  - Thread-safe with double-checked locking
  - clear_instance() for tests
  - logs creation and removal at DEBUG level
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    Metaclass that turns a regular class into a thread-safe singleton.

    Usage:
        class MyService(metaclass=SingletonMeta):
            def __init__(self):
                ...

        svc1 = MyService()
        svc2 = MyService()
        assert svc1 is svc2  # always True
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def clear_instance(cls) -> None:
        """Drop the instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["SingletonMeta"]
