# services/numbering_service.py
"""
Transport Order Numbering Service
=================================

Display codes are a fixed prefix plus the ordinal of the new order,
zero-padded:

    existing orders: 0  →  TRN001
    existing orders: 41 →  TRN042

The ordinal is the current collection length plus one. After a deletion
the next code can repeat one already in use; callers that need uniqueness
check next_available_code() instead.
"""

from __future__ import annotations
from typing import Iterable, Optional
import re

from constants import ORDER_CODE_PREFIX, ORDER_CODE_WIDTH
from exceptions import NumberingError


class NumberingService:

    @staticmethod
    def format_order_code(
        number: int,
        prefix: str = ORDER_CODE_PREFIX,
        width: int = ORDER_CODE_WIDTH,
    ) -> str:
        """prefix + number zero-padded to ``width`` digits (wider numbers are kept whole)."""
        if number < 0:
            raise NumberingError(f"Order number must be >= 0, got {number}", code="NUMBER_NEGATIVE")
        return f"{prefix}{str(number).zfill(width)}"

    @staticmethod
    def next_transport_order_code(existing_count: int, prefix: str = ORDER_CODE_PREFIX) -> str:
        """Code for a new order appended to a collection of ``existing_count`` orders."""
        return NumberingService.format_order_code(existing_count + 1, prefix)

    @staticmethod
    def next_available_code(existing_codes: Iterable[str], prefix: str = ORDER_CODE_PREFIX) -> str:
        """
        First code after the highest numeric code in ``existing_codes``.

        Codes without the prefix or without digits are ignored.
        """
        highest = 0
        for code in existing_codes:
            if not code or not code.startswith(prefix):
                continue
            n = NumberingService.extract_numeric_part(code[len(prefix):])
            if n is not None and n > highest:
                highest = n
        return NumberingService.format_order_code(highest + 1, prefix)

    @staticmethod
    def extract_numeric_part(code: str) -> Optional[int]:
        digits = re.sub(r'\D', '', code or "")
        return int(digits) if digits else None
