"""
services/excel_service.py
==========================
TRANSPORTDESK — Excel Export Service  (openpyxl-based)

Supported exports:
    export_transport_orders(...)   → one row per delivery, order columns repeated
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from exceptions import ExportError
from services.transport_records import TransportOrder

logger = logging.getLogger(__name__)


# ── Styling ───────────────────────────────────────────────────────────────────
_HEADER_BG  = "1A3A5C"
_BORDER_CLR = "CBD5E1"

_thin   = lambda: Side(style="thin", color=_BORDER_CLR)
_border = lambda: Border(left=_thin(), right=_thin(), top=_thin(), bottom=_thin())

def _hf(bold=False, color="000000", size=10):
    return Font(bold=bold, color=color, name="Calibri", size=size)

_HEADER_FILL = lambda: PatternFill("solid", fgColor=_HEADER_BG)
_CENTER = Alignment(horizontal="center", vertical="center")


def _style_header(ws, row: int, ncols: int):
    for c in range(1, ncols + 1):
        cell = ws.cell(row=row, column=c)
        cell.font      = _hf(bold=True, color="FFFFFF", size=11)
        cell.fill      = _HEADER_FILL()
        cell.border    = _border()
        cell.alignment = _CENTER


# ── Helpers ───────────────────────────────────────────────────────────────────
def _export_dir() -> Path:
    from core.config import Config
    from core.paths import exports_path

    custom = Config().export_dir()
    if custom:
        custom.mkdir(parents=True, exist_ok=True)
        return custom
    return exports_path()

def _ts() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def _s(v: Any) -> str:
    return "" if v is None else str(v)


# ── Column definitions: (key, header, width) ─────────────────────────────────
_ORDER_COLS = [
    ("order_id",          "Order ID",         12),
    ("created_date",      "Created",          12),
    ("status",            "Status",           12),
    ("vehicle_type",      "Vehicle Type",     14),
    ("vehicle_number",    "Vehicle Number",   16),
    ("driver_name",       "Driver",           20),
    ("driver_contact",    "Driver Contact",   14),
    ("total_cartons",     "Total Cartons",    12),
    ("total_packages",    "Total Packages",   14),
    ("customer_name",     "Customer",         20),
    ("district",          "District",         16),
    ("pickup_point",      "Pickup Point",     22),
    ("drop_point",        "Drop Point",       22),
    ("route_name",        "Route",            18),
    ("destination",       "Destination",      18),
    ("packages_assigned", "Packages",         10),
    ("charges_amount",    "Charges",          10),
    ("payment_method",    "Payment Method",   14),
    ("payment_status",    "Payment Status",   14),
]


def _order_rows(orders: Iterable[TransportOrder]) -> List[Dict[str, Any]]:
    rows = []
    for o in orders:
        head = {
            "order_id":       o.order_id,
            "created_date":   o.created_date,
            "status":         o.status,
            "vehicle_type":   o.vehicle_type,
            "vehicle_number": o.vehicle_number,
            "driver_name":    o.driver_name,
            "driver_contact": o.driver_contact,
            "total_cartons":  o.total_cartons,
            "total_packages": o.total_packages,
        }
        for d in o.deliveries:
            rows.append({
                **head,
                "customer_name":     d.customer_name,
                "district":          d.district,
                "pickup_point":      d.pickup_point,
                "drop_point":        d.drop_point,
                "route_name":        d.route_name,
                "destination":       d.destination,
                "packages_assigned": d.packages_assigned,
                "charges_amount":    d.charges_amount,
                "payment_method":    d.payment_method,
                "payment_status":    d.payment_status,
            })
    return rows


# ═══════════════════════════════════════════════════════════════════════════════
class ExcelService:
    """Builds .xlsx exports from transport order snapshots."""

    def export_transport_orders(
        self,
        orders: Iterable[TransportOrder],
        output_path: Optional[Path] = None,
    ) -> Path:
        """Export deliveries of ``orders``. Returns Path to generated .xlsx."""
        rows = _order_rows(orders)

        wb = Workbook()
        ws = wb.active
        ws.title = "Transport Orders"
        self._write_sheet(ws, _ORDER_COLS, rows)

        out = Path(output_path) if output_path else (_export_dir() / f"transport_orders_{_ts()}.xlsx")
        try:
            wb.save(out)
        except OSError as e:
            raise ExportError(f"Could not write {out}", code="EXPORT_WRITE", detail=str(e)) from e
        logger.info("Transport orders exported → %s (%d rows)", out, len(rows))
        return out

    def _write_sheet(self, ws, cols, rows):
        ncols = len(cols)
        for ci, (_, header, _) in enumerate(cols, 1):
            ws.cell(row=1, column=ci, value=header)
        _style_header(ws, 1, ncols)

        for ri, row in enumerate(rows, 2):
            for ci, (key, _, _) in enumerate(cols, 1):
                value = row.get(key, "")
                ws.cell(row=ri, column=ci, value=value if isinstance(value, int) else _s(value))

        for ci, (_, _, width) in enumerate(cols, 1):
            ws.column_dimensions[get_column_letter(ci)].width = width
        ws.freeze_panes = ws.cell(row=2, column=1)
