"""
services/transport_filters.py
==============================
Read-side helpers for the order list: search/filter, pagination and the
summary figures shown above the table. All functions are pure.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from constants import DEFAULT_PAGE_SIZE, FILTER_ALL, OrderStatus, PaymentStatus
from services.transport_records import TransportOrder


def _matches_search(order: TransportOrder, needle: str) -> bool:
    return needle in order.order_id.lower() or needle in order.driver_name.lower()


def _matches_payment(order: TransportOrder, payment: str) -> bool:
    if payment == PaymentStatus.PAID:
        return order.is_fully_paid
    if payment == PaymentStatus.UNPAID:
        return any(not d.is_paid for d in order.deliveries)
    return True


def filter_orders(
    orders: Iterable[TransportOrder],
    search: str = "",
    status: str = FILTER_ALL,
    payment: str = FILTER_ALL,
) -> List[TransportOrder]:
    """
    Orders matching every active filter, in their original order.

    - search:  case-insensitive substring of order code or driver name
    - status:  exact order status, or "All"
    - payment: "Paid" (every delivery paid), "Unpaid" (any delivery unpaid), or "All"
    """
    needle = (search or "").strip().lower()
    result = []
    for order in orders:
        if needle and not _matches_search(order, needle):
            continue
        if status and status != FILTER_ALL and order.status != status:
            continue
        if payment and payment != FILTER_ALL and not _matches_payment(order, payment):
            continue
        result.append(order)
    return result


@dataclass(frozen=True)
class Page:
    items:       Tuple[TransportOrder, ...]
    page:        int
    per_page:    int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: Sequence, page: int = 1, per_page: int = DEFAULT_PAGE_SIZE) -> Page:
    """
    Slice ``items`` into 1-based pages.

    Out-of-range page numbers are clamped; an empty list yields a single
    empty page.
    """
    per_page = max(1, int(per_page))
    total_items = len(items)
    total_pages = max(1, math.ceil(total_items / per_page))
    page = min(max(1, int(page)), total_pages)
    start = (page - 1) * per_page
    return Page(
        items=tuple(items[start:start + per_page]),
        page=page,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
    )


@dataclass(frozen=True)
class OrderSummary:
    total_orders:    int = 0
    by_status:       Dict[str, int] = field(default_factory=dict)
    total_packages:  int = 0
    total_charges:   int = 0
    paid_charges:    int = 0
    unpaid_charges:  int = 0


def summarize(orders: Iterable[TransportOrder]) -> OrderSummary:
    by_status = {s: 0 for s in OrderStatus.all()}
    total_orders = total_packages = paid = unpaid = 0

    for order in orders:
        total_orders += 1
        by_status[order.status] = by_status.get(order.status, 0) + 1
        total_packages += order.total_packages
        for d in order.deliveries:
            if d.is_paid:
                paid += d.charges_amount
            else:
                unpaid += d.charges_amount

    return OrderSummary(
        total_orders=total_orders,
        by_status=by_status,
        total_packages=total_packages,
        total_charges=paid + unpaid,
        paid_charges=paid,
        unpaid_charges=unpaid,
    )
