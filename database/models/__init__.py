from .base import Base, get_engine, get_session_local, reset_engine

from .storage_slot import StorageSlot

__all__ = [
    # session / base
    "Base", "get_engine", "get_session_local", "reset_engine",
    # models
    "StorageSlot",
]
