"""
TRANSPORTDESK Main Entry Point
==============================
Command line front end for transport delivery orders.

    transportdesk list [--search TEXT] [--status S] [--payment P] [--page N]
    transportdesk show ORDER
    transportdesk create --file order.json
    transportdesk update ORDER --file order.json
    transportdesk delete ORDER
    transportdesk status ORDER "In Transit"
    transportdesk payment ORDER DELIVERY_ID Paid
    transportdesk export [--output FILE] [filters]
    transportdesk districts [DISTRICT]

ORDER is either the internal id or the display code (TRN001).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from constants import (
    DEFAULT_PAGE_SIZE, FILTER_ALL, VEHICLE_TYPES, OrderStatus, PaymentMethod, PaymentStatus,
)
from core.logging_config import LoggingConfig
from exceptions import TransportDeskError
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="transportdesk",
        description=f"{APP_NAME} — transport delivery orders",
    )
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    ap.add_argument("--log-level", default=None,
                    help="DEBUG, INFO, WARNING or ERROR (default: $LOG_LEVEL or INFO)")
    sub = ap.add_subparsers(dest="command", required=True)

    def add_filters(p):
        p.add_argument("--search", default="", help="order code or driver name")
        p.add_argument("--status", default=FILTER_ALL, choices=[FILTER_ALL] + OrderStatus.all())
        p.add_argument("--payment", default=FILTER_ALL, choices=[FILTER_ALL] + PaymentStatus.all())

    order_file_help = (
        "camelCase order JSON; vehicleType is one of " + ", ".join(VEHICLE_TYPES)
    )

    p = sub.add_parser("list", help="list orders")
    add_filters(p)
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--per-page", type=int, default=DEFAULT_PAGE_SIZE)

    p = sub.add_parser("show", help="show one order with its deliveries")
    p.add_argument("order")

    p = sub.add_parser("create", help="create an order from a JSON file")
    p.add_argument("--file", required=True, type=Path, help=order_file_help)

    p = sub.add_parser("update", help="replace an order's details from a JSON file")
    p.add_argument("order")
    p.add_argument("--file", required=True, type=Path, help=order_file_help)

    p = sub.add_parser("delete", help="delete an order")
    p.add_argument("order")

    p = sub.add_parser("status", help="change an order's status")
    p.add_argument("order")
    p.add_argument("new_status", choices=OrderStatus.all())

    p = sub.add_parser("payment", help="change a delivery's payment status")
    p.add_argument("order")
    p.add_argument("delivery_id")
    p.add_argument("new_status", choices=PaymentStatus.all())

    p = sub.add_parser("export", help="export orders to .xlsx")
    add_filters(p)
    p.add_argument("--output", type=Path, default=None)

    p = sub.add_parser("districts", help="list districts, or the points of one district")
    p.add_argument("district", nargs="?")

    return ap


# ─── helpers ─────────────────────────────────────────────────────────────────

def _read_draft(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TransportDeskError(f"Cannot read order file {path}", code="BAD_INPUT", detail=str(e)) from e
    if not isinstance(data, dict):
        raise TransportDeskError(f"Order file {path} must contain a JSON object", code="BAD_INPUT")
    return data


def _resolve(service, ref: str):
    repo = service.repository
    return repo.get(ref) or repo.get_by_code(ref)


def _print_order(order) -> None:
    print(f"{order.order_id}  [{order.status}]  created {order.created_date}  id={order.id}")
    print(f"  Vehicle: {order.vehicle_type} {order.vehicle_number}")
    print(f"  Driver:  {order.driver_name} ({order.driver_contact})")
    print(f"  Cartons: {order.total_cartons}   Packages: {order.total_packages}")
    for i, d in enumerate(order.deliveries, 1):
        print(
            f"  {i}. {d.customer_name} | {d.district}: {d.pickup_point} → {d.drop_point} "
            f"| {d.route_name} | {d.packages_assigned} pkgs | {d.charges_amount} "
            f"{d.payment_method} {d.payment_status} | id={d.id}"
        )


def _report(result) -> int:
    if result.ok:
        print(result.message)
        return EXIT_OK
    if result.delivery_index is not None:
        print(f"{result.message} (delivery #{result.delivery_index + 1})", file=sys.stderr)
    else:
        print(result.message, file=sys.stderr)
    return EXIT_REJECTED


# ─── commands ────────────────────────────────────────────────────────────────

def _cmd_list(service, args) -> int:
    from services.transport_filters import filter_orders, paginate, summarize

    orders = filter_orders(service.repository.list(), args.search, args.status, args.payment)
    page = paginate(orders, args.page, args.per_page)
    for o in page.items:
        payment = PaymentStatus.PAID if o.is_fully_paid else PaymentStatus.UNPAID
        print(
            f"{o.order_id:<8} {o.created_date:<10} {o.vehicle_type:<12} {o.vehicle_number:<12} "
            f"{o.driver_name:<20} {o.total_packages:>5}/{o.total_cartons:<5} {o.status:<10} {payment}"
        )
    summary = summarize(orders)
    print(
        f"-- page {page.page}/{page.total_pages}, {page.total_items} orders, "
        f"{summary.total_packages} packages, charges {summary.total_charges} "
        f"(paid {summary.paid_charges}, unpaid {summary.unpaid_charges})"
    )
    return EXIT_OK


def _cmd_show(service, args) -> int:
    order = _resolve(service, args.order)
    if order is None:
        print(f"Transport order not found: {args.order}", file=sys.stderr)
        return EXIT_REJECTED
    _print_order(order)
    return EXIT_OK


def _cmd_create(service, args) -> int:
    result = service.submit(_read_draft(args.file))
    code = _report(result)
    if result.ok:
        _print_order(result.order)
    return code


def _cmd_update(service, args) -> int:
    order = _resolve(service, args.order)
    if order is None:
        print(f"Transport order not found: {args.order}", file=sys.stderr)
        return EXIT_REJECTED
    return _report(service.submit(_read_draft(args.file), editing_order_id=order.id))


def _cmd_delete(service, args) -> int:
    order = _resolve(service, args.order)
    return _report(service.delete(order.id if order else args.order))


def _cmd_status(service, args) -> int:
    order = _resolve(service, args.order)
    return _report(service.change_status(order.id if order else args.order, args.new_status))


def _cmd_payment(service, args) -> int:
    order = _resolve(service, args.order)
    return _report(service.change_payment_status(
        order.id if order else args.order, args.delivery_id, args.new_status,
    ))


def _cmd_export(service, args) -> int:
    from services.excel_service import ExcelService
    from services.transport_filters import filter_orders

    orders = filter_orders(service.repository.list(), args.search, args.status, args.payment)
    out = ExcelService().export_transport_orders(orders, output_path=args.output)
    print(f"Exported {len(orders)} orders to {out}")
    return EXIT_OK


def _cmd_districts(args) -> int:
    from services import district_catalog

    if not args.district:
        for name in district_catalog.get_district_names():
            print(name)
        return EXIT_OK
    if args.district not in district_catalog.DISTRICTS:
        print(f"Unknown district: {args.district}", file=sys.stderr)
        return EXIT_REJECTED
    print("Pickup points: " + ", ".join(district_catalog.get_pickup_points(args.district)))
    print("Drop points:   " + ", ".join(district_catalog.get_drop_points(args.district)))
    print("Payment methods: " + ", ".join(PaymentMethod.all()))
    return EXIT_OK


_COMMANDS = {
    "list":    _cmd_list,
    "show":    _cmd_show,
    "create":  _cmd_create,
    "update":  _cmd_update,
    "delete":  _cmd_delete,
    "status":  _cmd_status,
    "payment": _cmd_payment,
    "export":  _cmd_export,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # 1) Logging
    LoggingConfig.setup_logging(log_level=args.log_level)
    LoggingConfig.cleanup_old_logs(days_to_keep=30)

    if args.command == "districts":
        return _cmd_districts(args)

    try:
        # 2) Bootstrap: create the slot table if needed
        from database.bootstrap import run_bootstrap
        run_bootstrap()

        # 3) Dispatch
        from services.transport_service import TransportService
        service = TransportService()
        return _COMMANDS[args.command](service, args)
    except TransportDeskError as exc:
        logger.error(f"{args.command} failed: {exc}", exc_info=True)
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
