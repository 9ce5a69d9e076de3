"""
services/transport_records.py
==============================
Immutable snapshots of persisted transport orders.

Attributes are snake_case; to_dict()/from_dict() speak the camelCase
JSON shape stored in the order slot (see constants.TransportFields).
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Tuple

from exceptions import InvalidValueError
from constants import (
    TransportFields as F,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)


def new_id() -> str:
    """Opaque identifier for orders and deliveries."""
    return uuid.uuid4().hex


def as_int(value: Any, default: int = 0, name: str = "") -> int:
    """
    Whole-number conversion for values coming from forms or JSON.

    None and blank text give ``default``; 12, "12" and 12.0 give 12.
    Booleans, fractions, infinities and non-numeric text raise
    InvalidValueError naming ``name``.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise InvalidValueError(name, value, reason="expected a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = None
    if number is None or not number.is_integer():
        raise InvalidValueError(name, value, reason="expected a whole number")
    return int(number)


def as_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class DeliveryBreakdown:
    id:                str
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

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def to_dict(self) -> Dict[str, Any]:
        return {
            F.ID:                self.id,
            F.DESTINATION:       self.destination,
            F.ROUTE_NAME:        self.route_name,
            F.PACKAGES_ASSIGNED: self.packages_assigned,
            F.CUSTOMER_NAME:     self.customer_name,
            F.DISTRICT:          self.district,
            F.PICKUP_POINT:      self.pickup_point,
            F.DROP_POINT:        self.drop_point,
            F.CHARGES_AMOUNT:    self.charges_amount,
            F.PAYMENT_METHOD:    self.payment_method,
            F.PAYMENT_STATUS:    self.payment_status,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeliveryBreakdown":
        return cls(
            id=as_str(data.get(F.ID)) or new_id(),
            destination=as_str(data.get(F.DESTINATION)),
            route_name=as_str(data.get(F.ROUTE_NAME)),
            packages_assigned=as_int(data.get(F.PACKAGES_ASSIGNED), name=F.PACKAGES_ASSIGNED),
            customer_name=as_str(data.get(F.CUSTOMER_NAME)),
            district=as_str(data.get(F.DISTRICT)),
            pickup_point=as_str(data.get(F.PICKUP_POINT)),
            drop_point=as_str(data.get(F.DROP_POINT)),
            charges_amount=as_int(data.get(F.CHARGES_AMOUNT), name=F.CHARGES_AMOUNT),
            payment_method=as_str(data.get(F.PAYMENT_METHOD)) or PaymentMethod.CASH,
            payment_status=as_str(data.get(F.PAYMENT_STATUS)) or PaymentStatus.UNPAID,
        )


@dataclass(frozen=True)
class TransportOrder:
    id:             str
    order_id:       str
    vehicle_type:   str
    vehicle_number: str
    driver_name:    str
    driver_contact: str
    total_cartons:  int
    deliveries:     Tuple[DeliveryBreakdown, ...] = field(default_factory=tuple)
    status:         str = OrderStatus.CONFIRMED
    created_date:   str = ""
    total_packages: int = 0

    @property
    def is_fully_paid(self) -> bool:
        return all(d.is_paid for d in self.deliveries)

    @property
    def total_charges(self) -> int:
        return sum(d.charges_amount for d in self.deliveries)

    def find_delivery(self, delivery_id: str):
        return next((d for d in self.deliveries if d.id == delivery_id), None)

    def with_status(self, status: str) -> "TransportOrder":
        return replace(self, status=status)

    def with_payment_status(self, delivery_id: str, payment_status: str) -> "TransportOrder":
        deliveries = tuple(
            replace(d, payment_status=payment_status) if d.id == delivery_id else d
            for d in self.deliveries
        )
        return replace(self, deliveries=deliveries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            F.ID:             self.id,
            F.ORDER_ID:       self.order_id,
            F.VEHICLE_TYPE:   self.vehicle_type,
            F.VEHICLE_NUMBER: self.vehicle_number,
            F.DRIVER_NAME:    self.driver_name,
            F.DRIVER_CONTACT: self.driver_contact,
            F.TOTAL_CARTONS:  self.total_cartons,
            F.DELIVERIES:     [d.to_dict() for d in self.deliveries],
            F.STATUS:         self.status,
            F.CREATED_DATE:   self.created_date,
            F.TOTAL_PACKAGES: self.total_packages,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransportOrder":
        return cls(
            id=as_str(data.get(F.ID)) or new_id(),
            order_id=as_str(data.get(F.ORDER_ID)),
            vehicle_type=as_str(data.get(F.VEHICLE_TYPE)),
            vehicle_number=as_str(data.get(F.VEHICLE_NUMBER)),
            driver_name=as_str(data.get(F.DRIVER_NAME)),
            driver_contact=as_str(data.get(F.DRIVER_CONTACT)),
            total_cartons=as_int(data.get(F.TOTAL_CARTONS), name=F.TOTAL_CARTONS),
            deliveries=tuple(
                DeliveryBreakdown.from_dict(d) for d in (data.get(F.DELIVERIES) or [])
            ),
            status=as_str(data.get(F.STATUS)) or OrderStatus.CONFIRMED,
            created_date=as_str(data.get(F.CREATED_DATE)),
            total_packages=as_int(data.get(F.TOTAL_PACKAGES), name=F.TOTAL_PACKAGES),
        )


# Initial collection when the order slot does not exist yet.
SAMPLE_ORDERS = (
    TransportOrder(
        id="1",
        order_id="TRN001",
        vehicle_type="Mini Truck",
        vehicle_number="TN01AB1234",
        driver_name="Rajesh Kumar",
        driver_contact="9876543210",
        total_cartons=50,
        deliveries=(
            DeliveryBreakdown(
                id="1",
                destination="Chennai",
                route_name="Chennai Route",
                packages_assigned=25,
                customer_name="Priya Sharma",
                district="Chennai",
                pickup_point="Koyambedu",
                drop_point="T. Nagar",
                charges_amount=1500,
                payment_method=PaymentMethod.CARD,
                payment_status=PaymentStatus.PAID,
            ),
        ),
        status=OrderStatus.IN_TRANSIT,
        created_date="2024-01-15",
        total_packages=25,
    ),
)
