"""
TRANSPORTDESK Constants - Single Source of Truth
================================================

This file contains all constants used across the application.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""


class TransportFields:
    """
    JSON keys of the persisted transport order array.

    The slot format is camelCase; Python attributes are snake_case and
    mapped through these names.

    Usage:
        from constants import TransportFields as F
        order_code = data.get(F.ORDER_ID)
    """

    # ==================== Order Fields ====================
    ID = "id"
    ORDER_ID = "orderId"
    VEHICLE_TYPE = "vehicleType"
    VEHICLE_NUMBER = "vehicleNumber"
    DRIVER_NAME = "driverName"
    DRIVER_CONTACT = "driverContact"
    TOTAL_CARTONS = "totalCartons"
    DELIVERIES = "deliveries"
    STATUS = "status"
    CREATED_DATE = "createdDate"
    TOTAL_PACKAGES = "totalPackages"

    # ==================== Delivery Fields ====================
    DESTINATION = "destination"
    ROUTE_NAME = "routeName"
    PACKAGES_ASSIGNED = "packagesAssigned"
    CUSTOMER_NAME = "customerName"
    DISTRICT = "district"
    PICKUP_POINT = "pickupPoint"
    DROP_POINT = "dropPoint"
    CHARGES_AMOUNT = "chargesAmount"
    PAYMENT_METHOD = "paymentMethod"
    PAYMENT_STATUS = "paymentStatus"


class OrderStatus:
    """Transport order status values (flat, no transition rules)."""

    CONFIRMED = "Confirmed"
    IN_TRANSIT = "In Transit"
    DELIVERED = "Delivered"

    @classmethod
    def all(cls):
        return [cls.CONFIRMED, cls.IN_TRANSIT, cls.DELIVERED]


class PaymentStatus:
    """Delivery payment status values."""

    PAID = "Paid"
    UNPAID = "Unpaid"

    @classmethod
    def all(cls):
        return [cls.PAID, cls.UNPAID]


class PaymentMethod:
    """Accepted payment methods for a delivery."""

    CASH = "Cash"
    CARD = "Card"
    BANK_TRANSFER = "Bank Transfer"

    @classmethod
    def all(cls):
        return [cls.CASH, cls.CARD, cls.BANK_TRANSFER]


# Vehicle types offered by the order form
VEHICLE_TYPES = ["Van", "Mini Truck", "Lorry", "Pickup", "Container"]

# Filter value meaning "no filtering"
FILTER_ALL = "All"

# Order code allocation: TRN001, TRN002, ...
ORDER_CODE_PREFIX = "TRN"
ORDER_CODE_WIDTH = 3

# Storage slot holding the serialized order array
STORAGE_KEY = "crackers_craze_transport_orders"

# List view defaults
DEFAULT_PAGE_SIZE = 10
