"""
services/transport_repository.py
=================================
TransportOrderRepository — the transport order collection.

The whole collection is one JSON array kept in a storage slot:
  - read once when the repository is created
  - rewritten in full after every successful mutation
  - the in-memory snapshot is swapped only after the write succeeded

Readers always get immutable snapshots (tuples of frozen dataclasses).
"""
from __future__ import annotations

import json
import logging
from dataclasses import replace
from datetime import date
from typing import Callable, Optional, Tuple

from constants import OrderStatus, PaymentStatus
from exceptions import DatabaseError, InvalidValueError, StorageError
from services.numbering_service import NumberingService
from services.transport_records import SAMPLE_ORDERS, TransportOrder, new_id
from services.transport_validator import ValidatedOrder

logger = logging.getLogger(__name__)


class TransportOrderRepository:

    def __init__(
        self,
        slots=None,
        *,
        storage_key: Optional[str] = None,
        seed_sample: Optional[bool] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            slots: object with get_value(key) / set_value(key, text);
                   defaults to StorageSlotsCRUD
            storage_key: slot name; defaults to Config().storage_key()
            seed_sample: start from the sample order when the slot does not
                         exist yet; defaults to Config().seed_sample()
            today: date provider used for createdDate
        """
        if slots is None:
            from database.crud.storage_slots_crud import StorageSlotsCRUD
            slots = StorageSlotsCRUD()
        if storage_key is None or seed_sample is None:
            from core.config import Config
            config = Config()
            storage_key = storage_key if storage_key is not None else config.storage_key()
            seed_sample = seed_sample if seed_sample is not None else config.seed_sample()

        self._slots = slots
        self.storage_key = storage_key
        self._seed_sample = seed_sample
        self._today = today or date.today
        self._orders: Tuple[TransportOrder, ...] = self._load()

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def _load(self) -> Tuple[TransportOrder, ...]:
        try:
            raw = self._slots.get_value(self.storage_key)
        except DatabaseError as e:
            raise StorageError(self.storage_key, detail=str(e)) from e

        if raw is None:
            if self._seed_sample:
                logger.info("Slot %r is empty, starting from the sample order", self.storage_key)
                return SAMPLE_ORDERS
            return ()

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            orders = tuple(TransportOrder.from_dict(item) for item in data)
        except (ValueError, TypeError, AttributeError, InvalidValueError) as e:
            logger.warning("Unreadable data in slot %r, starting empty: %s", self.storage_key, e)
            return ()

        logger.debug("Loaded %d transport orders from %r", len(orders), self.storage_key)
        return orders

    def _commit(self, orders: Tuple[TransportOrder, ...]) -> None:
        payload = json.dumps([o.to_dict() for o in orders], ensure_ascii=False)
        try:
            self._slots.set_value(self.storage_key, payload)
        except DatabaseError as e:
            logger.error("Could not persist transport orders: %s", e)
            raise StorageError(self.storage_key, detail=str(e)) from e
        self._orders = orders

    def reload(self) -> Tuple[TransportOrder, ...]:
        """Discard the snapshot and read the slot again."""
        self._orders = self._load()
        return self._orders

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def list(self) -> Tuple[TransportOrder, ...]:
        return self._orders

    def get(self, order_id: str) -> Optional[TransportOrder]:
        return next((o for o in self._orders if o.id == order_id), None)

    def get_by_code(self, code: str) -> Optional[TransportOrder]:
        return next((o for o in self._orders if o.order_id == code), None)

    def __len__(self) -> int:
        return len(self._orders)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def create(self, validated: ValidatedOrder, *, created: Optional[date] = None) -> TransportOrder:
        order = TransportOrder(
            id=new_id(),
            order_id=NumberingService.next_transport_order_code(len(self._orders)),
            vehicle_type=validated.vehicle_type,
            vehicle_number=validated.vehicle_number,
            driver_name=validated.driver_name,
            driver_contact=validated.driver_contact,
            total_cartons=validated.total_cartons,
            deliveries=validated.deliveries,
            status=OrderStatus.CONFIRMED,
            created_date=(created or self._today()).isoformat(),
            total_packages=validated.total_packages,
        )
        self._commit(self._orders + (order,))
        logger.info("Transport order %s created (id=%s)", order.order_id, order.id)
        return order

    def update(self, order_id: str, validated: ValidatedOrder) -> Optional[TransportOrder]:
        """Replace the editable fields; id, code, status and createdDate are kept."""
        current = self.get(order_id)
        if current is None:
            logger.debug(f"TransportOrder id={order_id} not found for update → returning None")
            return None

        updated = replace(
            current,
            vehicle_type=validated.vehicle_type,
            vehicle_number=validated.vehicle_number,
            driver_name=validated.driver_name,
            driver_contact=validated.driver_contact,
            total_cartons=validated.total_cartons,
            deliveries=validated.deliveries,
            total_packages=validated.total_packages,
        )
        self._replace(updated)
        logger.info("Transport order %s updated", updated.order_id)
        return updated

    def delete(self, order_id: str) -> bool:
        remaining = tuple(o for o in self._orders if o.id != order_id)
        if len(remaining) == len(self._orders):
            return False
        self._commit(remaining)
        logger.info("Transport order id=%s deleted", order_id)
        return True

    def update_status(self, order_id: str, status: str) -> Optional[TransportOrder]:
        """Set any status; there are no transition rules."""
        if status not in OrderStatus.all():
            raise InvalidValueError("status", status, reason=f"expected one of {OrderStatus.all()}")
        current = self.get(order_id)
        if current is None:
            return None
        updated = current.with_status(status)
        self._replace(updated)
        logger.info("Transport order %s status → %s", updated.order_id, status)
        return updated

    def update_payment_status(
        self,
        order_id: str,
        delivery_id: str,
        payment_status: str,
    ) -> Optional[TransportOrder]:
        if payment_status not in PaymentStatus.all():
            raise InvalidValueError(
                "paymentStatus", payment_status, reason=f"expected one of {PaymentStatus.all()}"
            )
        current = self.get(order_id)
        if current is None or current.find_delivery(delivery_id) is None:
            return None
        updated = current.with_payment_status(delivery_id, payment_status)
        self._replace(updated)
        logger.info(
            "Transport order %s delivery %s payment → %s",
            updated.order_id, delivery_id, payment_status,
        )
        return updated

    def _replace(self, order: TransportOrder) -> None:
        self._commit(tuple(order if o.id == order.id else o for o in self._orders))
