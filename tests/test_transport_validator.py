# -*- coding: utf-8 -*-
"""
tests/test_transport_validator.py
==================================
Accept/reject rules for transport order drafts. Pure Python, no DB.
"""
import copy

import pytest

from exceptions import TransportValidationError, ValidationError
from services.transport_validator import (
    MESSAGES,
    RejectionReason,
    ValidatedOrder,
    validate_transport_order,
)

R = RejectionReason


def _reason(draft):
    with pytest.raises(TransportValidationError) as exc:
        validate_transport_order(draft)
    return exc.value


# ── accepted drafts ───────────────────────────────────────────────────────────

class TestAccept:

    def test_valid_draft_is_accepted(self, valid_draft):
        result = validate_transport_order(valid_draft)
        assert isinstance(result, ValidatedOrder)
        assert result.total_packages == 9
        assert result.total_cartons == 10
        assert len(result.deliveries) == 2

    def test_packages_equal_to_cartons_is_accepted(self, make_draft, make_delivery):
        draft = make_draft(total_cartons=9)
        assert validate_transport_order(draft).total_packages == 9

    def test_header_fields_are_trimmed(self, make_draft):
        draft = make_draft(vehicle_number="  TN01AB1234 ", driver_name=" Raj ",
                           driver_contact=" 9876543210 ")
        result = validate_transport_order(draft)
        assert result.vehicle_number == "TN01AB1234"
        assert result.driver_name == "Raj"
        assert result.driver_contact == "9876543210"

    def test_deliveries_keep_order_and_ids(self, valid_draft):
        result = validate_transport_order(valid_draft)
        assert [d.id for d in result.deliveries] == [d.id for d in valid_draft.deliveries]
        assert [d.customer_name for d in result.deliveries] == ["A", "B"]

    def test_validation_does_not_mutate_draft(self, valid_draft):
        before = copy.deepcopy(valid_draft)
        validate_transport_order(valid_draft)
        assert valid_draft == before

    def test_destination_is_optional(self, make_draft, make_delivery):
        draft = make_draft(deliveries=[make_delivery(destination="")])
        validate_transport_order(draft)

    def test_accepts_camel_case_mapping(self):
        result = validate_transport_order({
            "vehicleType": "Van",
            "vehicleNumber": "TN01AB1234",
            "driverName": "Raj",
            "driverContact": "9876543210",
            "totalCartons": "10",
            "deliveries": [{
                "id": "d1", "routeName": "R1", "packagesAssigned": "3",
                "customerName": "A", "district": "Chennai",
                "pickupPoint": "Koyambedu", "dropPoint": "Adyar",
            }],
        })
        assert result.total_packages == 3
        assert result.deliveries[0].id == "d1"


# ── header checks ─────────────────────────────────────────────────────────────

class TestHeader:

    @pytest.mark.parametrize("field", [
        "vehicle_type", "vehicle_number", "driver_name", "driver_contact",
    ])
    def test_missing_header_field(self, make_draft, field):
        err = _reason(make_draft(**{field: ""}))
        assert err.reason is R.MISSING_VEHICLE_OR_DRIVER_FIELD
        assert err.message == "Please fill all vehicle and driver details"
        assert err.delivery_index is None

    def test_whitespace_only_counts_as_missing(self, make_draft):
        assert _reason(make_draft(driver_name="   ")).reason is R.MISSING_VEHICLE_OR_DRIVER_FIELD

    @pytest.mark.parametrize("contact", [
        "987654321", "abcdefghij", "123456789a",
        "12345", "98765432101", "98765abcde", "+919876543", "98765 4321",
    ])
    def test_invalid_driver_contact(self, make_draft, contact):
        err = _reason(make_draft(driver_contact=contact))
        assert err.reason is R.INVALID_DRIVER_CONTACT
        assert err.message == "Driver contact must be a 10-digit number"

    def test_missing_field_wins_over_bad_contact(self, make_draft):
        err = _reason(make_draft(vehicle_type="", driver_contact="12"))
        assert err.reason is R.MISSING_VEHICLE_OR_DRIVER_FIELD


# ── collection checks ─────────────────────────────────────────────────────────

class TestCollection:

    def test_no_deliveries(self, make_draft):
        err = _reason(make_draft(deliveries=[]))
        assert err.reason is R.NO_DELIVERIES_ADDED

    def test_no_deliveries_wins_over_zero_cartons(self, make_draft):
        err = _reason(make_draft(deliveries=[], total_cartons=0))
        assert err.reason is R.NO_DELIVERIES_ADDED

    @pytest.mark.parametrize("cartons", [0, -1])
    def test_non_positive_cartons(self, make_draft, cartons):
        err = _reason(make_draft(total_cartons=cartons))
        assert err.reason is R.INVALID_TOTAL_CARTONS
        assert err.message == "Total cartons must be greater than 0"


# ── per-delivery checks ───────────────────────────────────────────────────────

class TestDeliveries:

    @pytest.mark.parametrize("field", [
        "customer_name", "district", "pickup_point", "drop_point", "route_name",
    ])
    def test_incomplete_delivery(self, make_draft, make_delivery, field):
        bad = make_delivery(**{field: ""})
        err = _reason(make_draft(deliveries=[make_delivery(), bad]))
        assert err.reason is R.INCOMPLETE_DELIVERY_FIELDS
        assert err.delivery_index == 1
        assert err.delivery_id == bad.id

    @pytest.mark.parametrize("packages", [0, -3])
    def test_non_positive_packages(self, make_draft, make_delivery, packages):
        bad = make_delivery(packages_assigned=packages)
        err = _reason(make_draft(deliveries=[bad]))
        assert err.reason is R.INVALID_PACKAGES_ASSIGNED
        assert err.delivery_index == 0
        assert err.delivery_id == bad.id

    def test_first_bad_delivery_reported(self, make_draft, make_delivery):
        draft = make_draft(deliveries=[
            make_delivery(),
            make_delivery(packages_assigned=0),
            make_delivery(customer_name=""),
        ])
        err = _reason(draft)
        assert err.reason is R.INVALID_PACKAGES_ASSIGNED
        assert err.delivery_index == 1

    def test_fields_checked_before_packages_within_a_delivery(self, make_draft, make_delivery):
        err = _reason(make_draft(deliveries=[make_delivery(district="", packages_assigned=0)]))
        assert err.reason is R.INCOMPLETE_DELIVERY_FIELDS


# ── capacity ──────────────────────────────────────────────────────────────────

class TestCapacity:

    def test_van_scenario_over_capacity(self, make_draft, make_delivery):
        draft = make_draft(deliveries=[
            make_delivery(customer_name="A", packages_assigned=6, route_name="R1"),
            make_delivery(customer_name="B", packages_assigned=5, route_name="R2", drop_point="Adyar"),
        ])
        err = _reason(draft)
        assert err.reason is R.PACKAGES_EXCEED_CARTONS
        assert err.message == "Total packages (11) cannot exceed total cartons (10)"

    def test_van_scenario_at_capacity(self, make_draft, make_delivery):
        draft = make_draft(deliveries=[
            make_delivery(customer_name="A", packages_assigned=6, route_name="R1"),
            make_delivery(customer_name="B", packages_assigned=4, route_name="R2", drop_point="Adyar"),
        ])
        assert validate_transport_order(draft).total_packages == 10

    @pytest.mark.parametrize("split", [
        [11],
        [10, 1],
        [1, 10],
        [4, 4, 3],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        [9, 9],
    ])
    def test_excess_is_caught_however_it_is_split(self, make_draft, make_delivery, split):
        draft = make_draft(deliveries=[make_delivery(packages_assigned=n) for n in split])
        err = _reason(draft)
        assert err.reason is R.PACKAGES_EXCEED_CARTONS
        assert err.message == f"Total packages ({sum(split)}) cannot exceed total cartons (10)"

    @pytest.mark.parametrize("split", [[10], [5, 5], [1, 2, 3, 4], [3, 3, 3]])
    def test_within_capacity_however_it_is_split(self, make_draft, make_delivery, split):
        draft = make_draft(deliveries=[make_delivery(packages_assigned=n) for n in split])
        assert validate_transport_order(draft).total_packages == sum(split)

    def test_packages_exceed_cartons(self, make_draft):
        err = _reason(make_draft(total_cartons=8))
        assert err.reason is R.PACKAGES_EXCEED_CARTONS
        assert err.message == "Total packages (9) cannot exceed total cartons (8)"
        assert err.delivery_index is None

    def test_delivery_errors_win_over_capacity(self, make_draft, make_delivery):
        draft = make_draft(total_cartons=1, deliveries=[
            make_delivery(packages_assigned=5), make_delivery(route_name=""),
        ])
        assert _reason(draft).reason is R.INCOMPLETE_DELIVERY_FIELDS


# ── idempotence ───────────────────────────────────────────────────────────────

class TestIdempotence:

    def test_accepted_twice_with_same_total(self, valid_draft):
        first = validate_transport_order(valid_draft)
        second = validate_transport_order(valid_draft)
        assert first == second
        assert first.total_packages == second.total_packages == 9

    @pytest.mark.parametrize("overrides", [
        {"driver_contact": "987654321"},
        {"total_cartons": 8},
        {"deliveries": []},
    ])
    def test_rejected_twice_with_same_reason(self, make_draft, overrides):
        draft = make_draft(**overrides)
        first, second = _reason(draft), _reason(draft)
        assert first.reason is second.reason
        assert first.message == second.message


# ── error object ──────────────────────────────────────────────────────────────

class TestRejectionError:

    def test_is_validation_error(self, make_draft):
        err = _reason(make_draft(deliveries=[]))
        assert isinstance(err, ValidationError)

    def test_code_mirrors_reason(self, make_draft):
        err = _reason(make_draft(deliveries=[]))
        assert err.code == "NoDeliveriesAdded"

    def test_every_reason_has_a_message(self):
        assert set(MESSAGES) == set(RejectionReason)
