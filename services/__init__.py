from .transport_service import TransportService, SubmitResult
from .transport_repository import TransportOrderRepository
from .transport_validator import RejectionReason, ValidatedOrder, validate_transport_order

__all__ = [
    "TransportService",
    "SubmitResult",
    "TransportOrderRepository",
    "RejectionReason",
    "ValidatedOrder",
    "validate_transport_order",
]
