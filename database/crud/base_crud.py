"""
database/crud/base_crud.py
===========================
BaseCRUD — base class for every CRUD in the project.

Session rules:
  1. get_session() is a small explicit context manager
  2. each write ends with exactly one commit
  3. automatic rollback on any exception
  4. close() guaranteed in finally, unless the session is shared
  5. accepts a callable (get_session_local) or a Session (tests)
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from contextlib import contextmanager
from typing import Any, Callable, Optional
from datetime import datetime, timezone
import logging

from exceptions import DatabaseError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseCRUD:

    def __init__(
        self,
        model: Any,
        session_factory: Callable,
        *,
        table_name: Optional[str] = None,
    ):
        self.model           = model
        self.session_factory = session_factory
        self.table_name      = table_name or getattr(model, "__tablename__", model.__name__.lower())

    # ─────────────────────────────────────────────────────────────────────────
    # Session Management
    # ─────────────────────────────────────────────────────────────────────────

    @contextmanager
    def get_session(self) -> Session:
        """
        Yield a ready Session.

        Case 1 — a Session was injected directly:
            used as-is and never closed (managed by the caller)

        Case 2 — a callable (get_session_local):
            factory() → sessionmaker → factory()() → Session
            factory() → Session (shared test session)

        SQLAlchemy failures are rolled back and re-raised as DatabaseError.
        """
        if isinstance(self.session_factory, Session):
            yield self.session_factory
            return

        session = None
        try:
            result = self.session_factory()

            if isinstance(result, Session):
                session = result
            elif callable(result):
                session = result()
            else:
                raise TypeError(
                    f"session_factory returned unexpected type: {type(result).__name__}"
                )

            yield session

        except SQLAlchemyError as e:
            if session is not None:
                session.rollback()
            logger.error(f"Session error in {self.model.__name__}: {e}")
            raise DatabaseError(
                f"Database operation failed on {self.table_name}",
                code="DB_ERROR",
                detail=str(e),
            ) from e

        except Exception:
            if session is not None:
                session.rollback()
            raise

        finally:
            should_close = (
                session is not None
                and not getattr(session, "_is_shared_test_session", False)
            )
            if should_close:
                session.close()

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _stamp_create(self, obj: Any):
        now = _utcnow()
        if hasattr(obj, "created_at") and getattr(obj, "created_at", None) is None:
            setattr(obj, "created_at", now)
        if hasattr(obj, "updated_at"):
            setattr(obj, "updated_at", now)

    def _stamp_update(self, obj: Any):
        if hasattr(obj, "updated_at"):
            setattr(obj, "updated_at", _utcnow())
