"""
Storage Slots CRUD - TRANSPORTDESK
Key/value access to the storage_slots table.
"""
import logging
from typing import List, Optional

from database.models import get_session_local, StorageSlot
from database.crud.base_crud import BaseCRUD

logger = logging.getLogger(__name__)


class StorageSlotsCRUD(BaseCRUD):
    """Read and write whole serialized documents by key."""

    def __init__(self):
        super().__init__(StorageSlot, get_session_local)
        logger.debug("StorageSlotsCRUD initialized")

    def _find(self, session, key: str) -> Optional[StorageSlot]:
        return session.query(StorageSlot).filter_by(key=key).one_or_none()

    # -----------------------------
    # Read
    # -----------------------------
    def get_value(self, key: str) -> Optional[str]:
        """Raw text stored under ``key``, or None when the slot is missing."""
        with self.get_session() as session:
            slot = self._find(session, key)
            return slot.value if slot is not None else None

    def has_key(self, key: str) -> bool:
        with self.get_session() as session:
            return self._find(session, key) is not None

    def list_keys(self) -> List[str]:
        with self.get_session() as session:
            rows = session.query(StorageSlot.key).order_by(StorageSlot.key).all()
            return [key for (key,) in rows]

    # -----------------------------
    # Write
    # -----------------------------
    def set_value(self, key: str, value: str) -> StorageSlot:
        """Create or overwrite the slot."""
        with self.get_session() as session:
            slot = self._find(session, key)
            if slot is None:
                slot = StorageSlot(key=key, value=value)
                self._stamp_create(slot)
                session.add(slot)
            else:
                slot.value = value
                self._stamp_update(slot)
            session.commit()
            session.refresh(slot)
            logger.debug("Slot %r written (%d chars)", key, len(value or ""))
            return slot

    def delete_value(self, key: str) -> bool:
        with self.get_session() as session:
            slot = self._find(session, key)
            if slot is None:
                return False
            session.delete(slot)
            session.commit()
            return True
