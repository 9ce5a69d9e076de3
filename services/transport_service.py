"""
services/transport_service.py
==============================
Facade used by the CLI (or any other outer surface) to act on transport
orders. Every call returns a SubmitResult; validation and storage failures
are reported through it instead of being raised.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from exceptions import InvalidValueError, StorageError, TransportValidationError
from services.transport_form import OrderDraft
from services.transport_records import TransportOrder
from services.transport_repository import TransportOrderRepository
from services.transport_validator import RejectionReason, validate_transport_order

logger = logging.getLogger(__name__)

MSG_CREATED = "Transport order {order_id} created successfully!"
MSG_UPDATED = "Transport order updated successfully!"
MSG_DELETED = "Transport order deleted successfully!"
MSG_STATUS = "Order status changed to {status}"
MSG_PAYMENT = "Payment marked as {status}"
MSG_NOT_FOUND = "Transport order not found"
MSG_DELIVERY_NOT_FOUND = "Delivery not found in transport order"


@dataclass
class SubmitResult:
    ok: bool
    message: str
    order: Optional[TransportOrder] = None
    reason: Optional[RejectionReason] = None
    delivery_index: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok


class TransportService:

    def __init__(self, repository: Optional[TransportOrderRepository] = None):
        # An empty repository is falsy (it defines __len__)
        self.repository = repository if repository is not None else TransportOrderRepository()

    def submit(
        self,
        draft: Union[OrderDraft, Mapping[str, Any]],
        editing_order_id: Optional[str] = None,
    ) -> SubmitResult:
        """
        Validate ``draft`` and store it.

        With ``editing_order_id`` the existing order is updated in place,
        otherwise a new order is created.
        """
        try:
            validated = validate_transport_order(draft)
        except TransportValidationError as e:
            return SubmitResult(
                ok=False,
                message=e.message,
                reason=e.reason,
                delivery_index=e.delivery_index,
            )
        except InvalidValueError as e:
            # malformed mapping input, see OrderDraft.from_dict
            return SubmitResult(ok=False, message=e.message)

        try:
            if editing_order_id:
                order = self.repository.update(editing_order_id, validated)
                if order is None:
                    return SubmitResult(ok=False, message=MSG_NOT_FOUND)
                return SubmitResult(ok=True, message=MSG_UPDATED, order=order)

            order = self.repository.create(validated)
            return SubmitResult(
                ok=True,
                message=MSG_CREATED.format(order_id=order.order_id),
                order=order,
            )
        except StorageError as e:
            logger.error(f"Saving transport order failed: {e}")
            return SubmitResult(ok=False, message=e.message)

    def change_status(self, order_id: str, status: str) -> SubmitResult:
        try:
            order = self.repository.update_status(order_id, status)
        except (InvalidValueError, StorageError) as e:
            return SubmitResult(ok=False, message=e.message)
        if order is None:
            return SubmitResult(ok=False, message=MSG_NOT_FOUND)
        return SubmitResult(ok=True, message=MSG_STATUS.format(status=status), order=order)

    def change_payment_status(self, order_id: str, delivery_id: str, status: str) -> SubmitResult:
        try:
            order = self.repository.update_payment_status(order_id, delivery_id, status)
        except (InvalidValueError, StorageError) as e:
            return SubmitResult(ok=False, message=e.message)
        if order is None:
            missing = self.repository.get(order_id) is None
            return SubmitResult(ok=False, message=MSG_NOT_FOUND if missing else MSG_DELIVERY_NOT_FOUND)
        return SubmitResult(ok=True, message=MSG_PAYMENT.format(status=status), order=order)

    def delete(self, order_id: str) -> SubmitResult:
        try:
            deleted = self.repository.delete(order_id)
        except StorageError as e:
            return SubmitResult(ok=False, message=e.message)
        if not deleted:
            return SubmitResult(ok=False, message=MSG_NOT_FOUND)
        return SubmitResult(ok=True, message=MSG_DELETED)
