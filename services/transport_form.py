"""
services/transport_form.py
===========================
Transient, editable state of the "Create / Edit Delivery Order" form.

The draft is mutable on purpose: the caller edits it field by field and
hands it to the validator on submit. Nothing here touches storage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from constants import TransportFields as F, PaymentMethod, PaymentStatus
from exceptions import InvalidValueError
from services.transport_records import (
    DeliveryBreakdown,
    TransportOrder,
    as_int,
    as_str,
    new_id,
)

logger = logging.getLogger(__name__)

# camelCase form/JSON name → DeliveryDraft attribute
_DELIVERY_FIELD_MAP = {
    F.DESTINATION:       "destination",
    F.ROUTE_NAME:        "route_name",
    F.PACKAGES_ASSIGNED: "packages_assigned",
    F.CUSTOMER_NAME:     "customer_name",
    F.DISTRICT:          "district",
    F.PICKUP_POINT:      "pickup_point",
    F.DROP_POINT:        "drop_point",
    F.CHARGES_AMOUNT:    "charges_amount",
    F.PAYMENT_METHOD:    "payment_method",
    F.PAYMENT_STATUS:    "payment_status",
}
_FIELD_NAMES = {attr: key for key, attr in _DELIVERY_FIELD_MAP.items()}
_INT_FIELDS = {"packages_assigned", "charges_amount"}
_CHOICE_FIELDS = {
    "payment_method": PaymentMethod.all,
    "payment_status": PaymentStatus.all,
}


def _coerce(attr: str, value: Any) -> Any:
    """Convert a raw form/JSON value for the DeliveryDraft attribute ``attr``."""
    if attr in _INT_FIELDS:
        return as_int(value, name=_FIELD_NAMES[attr])
    text = as_str(value)
    allowed = _CHOICE_FIELDS.get(attr)
    if allowed is not None and text not in allowed():
        raise InvalidValueError(_FIELD_NAMES[attr], value, reason=f"expected one of {allowed()}")
    return text


@dataclass
class DeliveryDraft:
    id:                str = field(default_factory=new_id)
    destination:       str = ""
    route_name:        str = ""
    packages_assigned: int = 0
    customer_name:     str = ""
    district:          str = ""
    pickup_point:      str = ""
    drop_point:        str = ""
    charges_amount:    int = 0
    payment_method:    str = PaymentMethod.CASH
    payment_status:    str = PaymentStatus.UNPAID

    def to_breakdown(self) -> DeliveryBreakdown:
        return DeliveryBreakdown(**{f.name: getattr(self, f.name) for f in fields(self)})

    @classmethod
    def from_breakdown(cls, delivery: DeliveryBreakdown) -> "DeliveryDraft":
        return cls(**{f.name: getattr(delivery, f.name) for f in fields(cls)})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeliveryDraft":
        draft = cls(id=as_str(data.get(F.ID)) or new_id())
        for key, attr in _DELIVERY_FIELD_MAP.items():
            if key in data:
                setattr(draft, attr, _coerce(attr, data[key]))
        return draft


@dataclass
class OrderDraft:
    vehicle_type:   str = ""
    vehicle_number: str = ""
    driver_name:    str = ""
    driver_contact: str = ""
    total_cartons:  int = 0
    deliveries:     List[DeliveryDraft] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Delivery rows
    # ------------------------------------------------------------------

    def add_delivery(self) -> DeliveryDraft:
        """Append a blank delivery row and return it."""
        delivery = DeliveryDraft()
        self.deliveries.append(delivery)
        return delivery

    def find_delivery(self, delivery_id: str) -> Optional[DeliveryDraft]:
        return next((d for d in self.deliveries if d.id == delivery_id), None)

    def update_delivery(self, delivery_id: str, field_name: str, value: Any) -> None:
        """
        Set one field of a delivery row.

        ``field_name`` may be the camelCase form name or the attribute name.
        Changing the district clears pickup and drop points, which are only
        meaningful within a district.
        """
        attr = _DELIVERY_FIELD_MAP.get(field_name, field_name)
        if attr not in _DELIVERY_FIELD_MAP.values():
            raise InvalidValueError(field_name, value, reason="unknown delivery field")

        delivery = self.find_delivery(delivery_id)
        if delivery is None:
            logger.debug("update_delivery: no delivery with id=%s", delivery_id)
            return

        setattr(delivery, attr, _coerce(attr, value))
        if attr == "district":
            delivery.pickup_point = ""
            delivery.drop_point = ""

    def remove_delivery(self, delivery_id: str) -> bool:
        before = len(self.deliveries)
        self.deliveries = [d for d in self.deliveries if d.id != delivery_id]
        return len(self.deliveries) != before

    # ------------------------------------------------------------------
    # Whole form
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self.vehicle_type = ""
        self.vehicle_number = ""
        self.driver_name = ""
        self.driver_contact = ""
        self.total_cartons = 0
        self.deliveries = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            F.VEHICLE_TYPE:   self.vehicle_type,
            F.VEHICLE_NUMBER: self.vehicle_number,
            F.DRIVER_NAME:    self.driver_name,
            F.DRIVER_CONTACT: self.driver_contact,
            F.TOTAL_CARTONS:  self.total_cartons,
            F.DELIVERIES:     [d.to_breakdown().to_dict() for d in self.deliveries],
        }

    @classmethod
    def from_order(cls, order: TransportOrder) -> "OrderDraft":
        """Load a persisted order into an editable draft."""
        return cls(
            vehicle_type=order.vehicle_type,
            vehicle_number=order.vehicle_number,
            driver_name=order.driver_name,
            driver_contact=order.driver_contact,
            total_cartons=order.total_cartons,
            deliveries=[DeliveryDraft.from_breakdown(d) for d in order.deliveries],
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrderDraft":
        """
        Build a draft from a camelCase mapping (JSON file, API payload).

        Raises:
            InvalidValueError: for a malformed deliveries list or a bad
                delivery field value
        """
        raw_deliveries = data.get(F.DELIVERIES)
        if raw_deliveries is None:
            raw_deliveries = []
        if not isinstance(raw_deliveries, (list, tuple)) or not all(
            isinstance(d, Mapping) for d in raw_deliveries
        ):
            raise InvalidValueError(F.DELIVERIES, reason="expected a list of delivery objects")
        return cls(
            vehicle_type=as_str(data.get(F.VEHICLE_TYPE)),
            vehicle_number=as_str(data.get(F.VEHICLE_NUMBER)),
            driver_name=as_str(data.get(F.DRIVER_NAME)),
            driver_contact=as_str(data.get(F.DRIVER_CONTACT)),
            total_cartons=as_int(data.get(F.TOTAL_CARTONS), name=F.TOTAL_CARTONS),
            deliveries=[DeliveryDraft.from_dict(d) for d in raw_deliveries],
        )
