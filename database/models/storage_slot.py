"""
storage_slot.py — TRANSPORTDESK
================================
Named key/value slot holding a serialized document (JSON text).

The transport order list lives in one slot, keyed by
constants.STORAGE_KEY, and is rewritten as a whole on every change.
"""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, DateTime, func

from database.models.base import Base


class StorageSlot(Base):
    __tablename__ = "storage_slots"

    id    = Column(Integer, primary_key=True, autoincrement=True)
    key   = Column(String(128), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        size = len(self.value) if self.value else 0
        return f"<StorageSlot(key={self.key!r}, size={size})>"
