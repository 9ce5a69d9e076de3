"""
services/transport_validator.py
================================
Accept/reject decision for a transport order draft.

Checks run in a fixed order and the first failure wins, so the message
shown to the user is deterministic:

    1. vehicle type, vehicle number, driver name, driver contact non-empty
    2. driver contact is exactly 10 digits
    3. at least one delivery
    4. total cartons > 0
    5. each delivery, in list order: required fields, then packages > 0
    6. sum of packages <= total cartons

Validation is pure: it reads the draft and never mutates it or any store.
"""
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from exceptions import TransportValidationError
from services.transport_form import OrderDraft
from services.transport_records import DeliveryBreakdown

logger = logging.getLogger(__name__)

DRIVER_CONTACT_RE = re.compile(r"^\d{10}$")

REQUIRED_DELIVERY_FIELDS = (
    "customer_name",
    "district",
    "pickup_point",
    "drop_point",
    "route_name",
)


class RejectionReason(str, enum.Enum):
    MISSING_VEHICLE_OR_DRIVER_FIELD = "MissingVehicleOrDriverField"
    INVALID_DRIVER_CONTACT = "InvalidDriverContact"
    NO_DELIVERIES_ADDED = "NoDeliveriesAdded"
    INVALID_TOTAL_CARTONS = "InvalidTotalCartons"
    INCOMPLETE_DELIVERY_FIELDS = "IncompleteDeliveryFields"
    INVALID_PACKAGES_ASSIGNED = "InvalidPackagesAssigned"
    PACKAGES_EXCEED_CARTONS = "PackagesExceedCartons"


MESSAGES = {
    RejectionReason.MISSING_VEHICLE_OR_DRIVER_FIELD:
        "Please fill all vehicle and driver details",
    RejectionReason.INVALID_DRIVER_CONTACT:
        "Driver contact must be a 10-digit number",
    RejectionReason.NO_DELIVERIES_ADDED:
        "Please add at least one delivery breakdown",
    RejectionReason.INVALID_TOTAL_CARTONS:
        "Total cartons must be greater than 0",
    RejectionReason.INCOMPLETE_DELIVERY_FIELDS:
        "Please fill all delivery details including customer name, district, "
        "pickup point, drop point, and route name",
    RejectionReason.INVALID_PACKAGES_ASSIGNED:
        "Packages assigned must be greater than 0 for all deliveries",
    RejectionReason.PACKAGES_EXCEED_CARTONS:
        "Total packages ({total_packages}) cannot exceed total cartons ({total_cartons})",
}


@dataclass(frozen=True)
class ValidatedOrder:
    """Accepted draft; id, order code, status and date are assigned by the repository."""

    vehicle_type:   str
    vehicle_number: str
    driver_name:    str
    driver_contact: str
    total_cartons:  int
    deliveries:     Tuple[DeliveryBreakdown, ...]
    total_packages: int


def _blank(value: Any) -> bool:
    return not str(value if value is not None else "").strip()


def _reject(reason: RejectionReason, *, delivery_index=None, delivery_id=None, **fmt):
    message = MESSAGES[reason].format(**fmt) if fmt else MESSAGES[reason]
    logger.debug("Transport order rejected: %s (delivery_index=%s)", reason.value, delivery_index)
    raise TransportValidationError(
        reason,
        message,
        delivery_index=delivery_index,
        delivery_id=delivery_id,
    )


def validate_transport_order(draft: Union[OrderDraft, Mapping[str, Any]]) -> ValidatedOrder:
    """
    Validate ``draft`` and compute its derived fields.

    Accepts an OrderDraft or a camelCase mapping.

    Raises:
        TransportValidationError: on the first violated rule
        InvalidValueError: a mapping that cannot be read as a draft
    """
    if isinstance(draft, Mapping):
        draft = OrderDraft.from_dict(draft)

    header = (draft.vehicle_type, draft.vehicle_number, draft.driver_name, draft.driver_contact)
    if any(_blank(v) for v in header):
        _reject(RejectionReason.MISSING_VEHICLE_OR_DRIVER_FIELD)

    driver_contact = str(draft.driver_contact).strip()
    if not DRIVER_CONTACT_RE.match(driver_contact):
        _reject(RejectionReason.INVALID_DRIVER_CONTACT)

    if not draft.deliveries:
        _reject(RejectionReason.NO_DELIVERIES_ADDED)

    if draft.total_cartons <= 0:
        _reject(RejectionReason.INVALID_TOTAL_CARTONS)

    for index, delivery in enumerate(draft.deliveries):
        if any(_blank(getattr(delivery, name)) for name in REQUIRED_DELIVERY_FIELDS):
            _reject(
                RejectionReason.INCOMPLETE_DELIVERY_FIELDS,
                delivery_index=index,
                delivery_id=delivery.id,
            )
        if delivery.packages_assigned <= 0:
            _reject(
                RejectionReason.INVALID_PACKAGES_ASSIGNED,
                delivery_index=index,
                delivery_id=delivery.id,
            )

    total_packages = sum(d.packages_assigned for d in draft.deliveries)
    if total_packages > draft.total_cartons:
        _reject(
            RejectionReason.PACKAGES_EXCEED_CARTONS,
            total_packages=total_packages,
            total_cartons=draft.total_cartons,
        )

    return ValidatedOrder(
        vehicle_type=str(draft.vehicle_type).strip(),
        vehicle_number=str(draft.vehicle_number).strip(),
        driver_name=str(draft.driver_name).strip(),
        driver_contact=driver_contact,
        total_cartons=draft.total_cartons,
        deliveries=tuple(d.to_breakdown() for d in draft.deliveries),
        total_packages=total_packages,
    )
