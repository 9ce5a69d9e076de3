"""
tests/conftest.py
=================
Shared pytest fixtures — in-memory SQLite, no production DB touched.
"""
import pytest
from unittest.mock import patch
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker

from services.transport_form import DeliveryDraft, OrderDraft

_SLOTS_PATCH = "database.crud.storage_slots_crud.get_session_local"


# ─── Engine (session-scoped) ──────────────────────────────────────────────────

@pytest.fixture(scope="session")
def db_engine():
    from database.models import Base
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        echo=False,
    )
    Base.metadata.create_all(engine)
    return engine


# ─── Per-test session (rolled back) ──────────────────────────────────────────

@pytest.fixture
def db_session(db_engine):
    """Each test gets its own transaction that is rolled back on teardown."""
    connection = db_engine.connect()
    nested = connection.begin_nested()
    SessionLocal = sessionmaker(bind=connection)
    session = SessionLocal()

    # Restart the savepoint after any commit inside CRUD
    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(session, transaction):
        if transaction.nested and not transaction._parent.nested:
            connection.execute(text("SAVEPOINT test_savepoint"))

    yield session

    session.close()
    nested.rollback()
    connection.close()


# ─── session_factory for CRUD patching ───────────────────────────────────────

@pytest.fixture
def session_factory(db_session):
    """
    Returns lambda → db_session so CRUD calls hit the in-memory DB.

    Replaces session.commit() with session.flush() so savepoints stay alive.
    """
    original_commit = db_session.commit
    db_session.commit = db_session.flush
    # Mark this session as shared (so BaseCRUD doesn't close it)
    db_session._is_shared_test_session = True
    yield lambda: db_session
    db_session._is_shared_test_session = False
    db_session.commit = original_commit


@pytest.fixture
def slots(session_factory):
    """StorageSlotsCRUD bound to the test session."""
    from database.crud.storage_slots_crud import StorageSlotsCRUD
    with patch(_SLOTS_PATCH, session_factory):
        return StorageSlotsCRUD()


class MemorySlots:
    """Dict-backed stand-in for StorageSlotsCRUD; ``fail_writes`` simulates a full store."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.writes = 0
        self.fail_writes = False

    def get_value(self, key):
        return self.data.get(key)

    def set_value(self, key, value):
        from exceptions import DatabaseError
        if self.fail_writes:
            raise DatabaseError("Database operation failed on storage_slots", code="DB_ERROR",
                                detail="quota exceeded")
        self.writes += 1
        self.data[key] = value


@pytest.fixture
def memory_slots():
    return MemorySlots()


@pytest.fixture
def make_repo(memory_slots):
    from services.transport_repository import TransportOrderRepository

    def _f(slots=None, seed_sample=False, **kw):
        return TransportOrderRepository(
            slots if slots is not None else memory_slots,
            storage_key=kw.pop("storage_key", "test_orders"),
            seed_sample=seed_sample,
            **kw,
        )
    return _f


# ─── Draft factories ─────────────────────────────────────────────────────────

@pytest.fixture
def make_delivery():
    def _f(**kw):
        values = dict(
            destination="Chennai",
            route_name="R1",
            packages_assigned=4,
            customer_name="A",
            district="Chennai",
            pickup_point="Koyambedu",
            drop_point="T. Nagar",
            charges_amount=500,
        )
        values.update(kw)
        return DeliveryDraft(**values)
    return _f


@pytest.fixture
def make_draft(make_delivery):
    """Van TN01AB1234 driven by Raj, 10 cartons, deliveries of 4 and 5 packages."""
    def _f(deliveries=None, **kw):
        values = dict(
            vehicle_type="Van",
            vehicle_number="TN01AB1234",
            driver_name="Raj",
            driver_contact="9876543210",
            total_cartons=10,
        )
        values.update(kw)
        if deliveries is None:
            deliveries = [
                make_delivery(packages_assigned=4, customer_name="A"),
                make_delivery(packages_assigned=5, customer_name="B",
                              pickup_point="Tambaram", drop_point="Adyar", route_name="R2"),
            ]
        return OrderDraft(deliveries=deliveries, **values)
    return _f


@pytest.fixture
def valid_draft(make_draft):
    return make_draft()
