# -*- coding: utf-8 -*-
"""
tests/test_transport_repository.py
====================================
TransportOrderRepository: loading, mutations and slot persistence.
"""
import json
from datetime import date

import pytest

from constants import OrderStatus, PaymentStatus
from exceptions import InvalidValueError, StorageError
from services.transport_records import SAMPLE_ORDERS, TransportOrder
from services.transport_repository import TransportOrderRepository
from services.transport_validator import validate_transport_order


def _stored(memory_slots, key="test_orders"):
    return json.loads(memory_slots.data[key])


# ── loading ───────────────────────────────────────────────────────────────────

class TestLoad:

    def test_missing_slot_seeds_sample(self, make_repo):
        repo = make_repo(seed_sample=True)
        assert repo.list() == SAMPLE_ORDERS
        assert repo.list()[0].order_id == "TRN001"

    def test_seed_is_not_written_until_a_mutation(self, make_repo, memory_slots):
        make_repo(seed_sample=True)
        assert memory_slots.writes == 0

    def test_missing_slot_without_seed_is_empty(self, make_repo):
        assert make_repo().list() == ()

    def test_existing_empty_array_is_not_reseeded(self, make_repo, memory_slots):
        memory_slots.data["test_orders"] = "[]"
        assert make_repo(seed_sample=True).list() == ()

    @pytest.mark.parametrize("raw", [
        "{not json", '{"a": 1}', "[1, 2]", "null", '[{"totalCartons": 2.5}]',
    ])
    def test_unreadable_slot_is_empty(self, make_repo, memory_slots, raw, caplog):
        memory_slots.data["test_orders"] = raw
        with caplog.at_level("WARNING"):
            repo = make_repo(seed_sample=True)
        assert repo.list() == ()
        assert "Unreadable" in caplog.text

    def test_loads_camel_case_records(self, make_repo, memory_slots):
        memory_slots.data["test_orders"] = json.dumps([SAMPLE_ORDERS[0].to_dict()])
        repo = make_repo()
        assert repo.list() == SAMPLE_ORDERS

    def test_reload_reads_slot_again(self, make_repo, memory_slots):
        repo = make_repo()
        memory_slots.data["test_orders"] = json.dumps([SAMPLE_ORDERS[0].to_dict()])
        assert repo.reload() == SAMPLE_ORDERS


# ── create ────────────────────────────────────────────────────────────────────

class TestCreate:

    def test_create_assigns_code_status_and_date(self, make_repo, valid_draft):
        repo = make_repo()
        order = repo.create(validate_transport_order(valid_draft), created=date(2024, 3, 1))
        assert order.order_id == "TRN001"
        assert order.status == OrderStatus.CONFIRMED
        assert order.created_date == "2024-03-01"
        assert order.total_packages == 9
        assert repo.list() == (order,)

    def test_create_uses_today_by_default(self, make_repo, valid_draft):
        repo = make_repo(today=lambda: date(2025, 12, 31))
        order = repo.create(validate_transport_order(valid_draft))
        assert order.created_date == "2025-12-31"

    def test_code_follows_collection_length(self, make_repo, valid_draft):
        repo = make_repo(seed_sample=True)
        order = repo.create(validate_transport_order(valid_draft))
        assert order.order_id == "TRN002"

    def test_code_can_repeat_after_delete(self, make_repo, valid_draft):
        repo = make_repo()
        v = validate_transport_order(valid_draft)
        first = repo.create(v)
        repo.create(v)
        repo.delete(first.id)
        assert repo.create(v).order_id == "TRN002"

    def test_ids_are_unique(self, make_repo, valid_draft):
        repo = make_repo()
        v = validate_transport_order(valid_draft)
        assert repo.create(v).id != repo.create(v).id

    def test_create_persists_whole_array(self, make_repo, memory_slots, valid_draft):
        repo = make_repo(seed_sample=True)
        repo.create(validate_transport_order(valid_draft))
        stored = _stored(memory_slots)
        assert [o["orderId"] for o in stored] == ["TRN001", "TRN002"]
        assert stored[1]["deliveries"][0]["packagesAssigned"] == 4
        assert stored[1]["totalPackages"] == 9

    def test_snapshot_unchanged_for_previous_readers(self, make_repo, valid_draft):
        repo = make_repo()
        before = repo.list()
        repo.create(validate_transport_order(valid_draft))
        assert before == ()
        assert len(repo) == 1


# ── update ────────────────────────────────────────────────────────────────────

class TestUpdate:

    def test_update_keeps_identity_fields(self, make_repo, make_draft, valid_draft):
        repo = make_repo()
        original = repo.create(validate_transport_order(valid_draft), created=date(2024, 1, 1))
        repo.update_status(original.id, OrderStatus.DELIVERED)

        changed = make_draft(vehicle_type="Truck", total_cartons=20)
        updated = repo.update(original.id, validate_transport_order(changed))

        assert updated.id == original.id
        assert updated.order_id == original.order_id
        assert updated.created_date == "2024-01-01"
        assert updated.status == OrderStatus.DELIVERED
        assert updated.vehicle_type == "Truck"
        assert updated.total_cartons == 20
        assert repo.get(original.id) == updated

    def test_update_unknown_id(self, make_repo, valid_draft, memory_slots):
        repo = make_repo()
        assert repo.update("missing", validate_transport_order(valid_draft)) is None
        assert memory_slots.writes == 0


# ── delete ────────────────────────────────────────────────────────────────────

class TestDelete:

    def test_delete(self, make_repo):
        repo = make_repo(seed_sample=True)
        assert repo.delete("1") is True
        assert repo.list() == ()

    def test_delete_unknown(self, make_repo, memory_slots):
        repo = make_repo(seed_sample=True)
        assert repo.delete("nope") is False
        assert memory_slots.writes == 0


# ── status changes ────────────────────────────────────────────────────────────

class TestStatus:

    @pytest.mark.parametrize("status", OrderStatus.all())
    def test_any_status_allowed(self, make_repo, status):
        repo = make_repo(seed_sample=True)
        assert repo.update_status("1", status).status == status

    def test_backwards_transition_allowed(self, make_repo):
        repo = make_repo(seed_sample=True)
        repo.update_status("1", OrderStatus.DELIVERED)
        assert repo.update_status("1", OrderStatus.CONFIRMED).status == OrderStatus.CONFIRMED

    def test_unknown_status_rejected(self, make_repo):
        repo = make_repo(seed_sample=True)
        with pytest.raises(InvalidValueError):
            repo.update_status("1", "Lost")

    def test_unknown_order(self, make_repo):
        assert make_repo().update_status("x", OrderStatus.DELIVERED) is None

    def test_payment_status(self, make_repo, memory_slots):
        repo = make_repo(seed_sample=True)
        order = repo.update_payment_status("1", "1", PaymentStatus.UNPAID)
        assert order.deliveries[0].payment_status == PaymentStatus.UNPAID
        assert _stored(memory_slots)[0]["deliveries"][0]["paymentStatus"] == "Unpaid"

    def test_payment_status_unknown_delivery(self, make_repo):
        repo = make_repo(seed_sample=True)
        assert repo.update_payment_status("1", "zzz", PaymentStatus.PAID) is None

    def test_payment_status_invalid_value(self, make_repo):
        repo = make_repo(seed_sample=True)
        with pytest.raises(InvalidValueError):
            repo.update_payment_status("1", "1", "Partially")


# ── persistence failures ──────────────────────────────────────────────────────

class TestPersistenceFailure:

    def test_failed_write_raises_and_keeps_snapshot(self, make_repo, memory_slots, valid_draft):
        repo = make_repo(seed_sample=True)
        memory_slots.fail_writes = True
        with pytest.raises(StorageError) as exc:
            repo.create(validate_transport_order(valid_draft))
        assert exc.value.key == "test_orders"
        assert repo.list() == SAMPLE_ORDERS

    def test_failed_delete_keeps_order(self, make_repo, memory_slots):
        repo = make_repo(seed_sample=True)
        memory_slots.fail_writes = True
        with pytest.raises(StorageError):
            repo.delete("1")
        assert repo.get("1") is not None


# ── against the database ──────────────────────────────────────────────────────

class TestWithStorageSlots:

    def test_round_trip_through_slot_table(self, slots, valid_draft):
        repo = TransportOrderRepository(slots, storage_key="orders", seed_sample=False)
        created = repo.create(validate_transport_order(valid_draft))

        again = TransportOrderRepository(slots, storage_key="orders", seed_sample=False)
        assert again.list() == (created,)
        assert isinstance(again.list()[0], TransportOrder)
