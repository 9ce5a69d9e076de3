"""
database/bootstrap.py — TRANSPORTDESK
======================================
Prepares the database before the first CRUD call: creates the tables
that do not exist yet. Safe to run on every start.
"""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from exceptions import DatabaseError

logger = logging.getLogger(__name__)


def run_bootstrap(engine=None) -> list:
    """
    Create missing tables on ``engine`` (the shared engine by default).

    Returns the table names present after the run.
    """
    from database.models import Base, get_engine

    engine = engine or get_engine()
    try:
        Base.metadata.create_all(bind=engine)
        tables = sorted(inspect(engine).get_table_names())
    except SQLAlchemyError as exc:
        logger.error(f"Bootstrap failed: {exc}", exc_info=True)
        raise DatabaseError("Database bootstrap failed", code="DB_BOOTSTRAP", detail=str(exc)) from exc

    logger.info("Bootstrap: tables ready (%s)", ", ".join(tables))
    return tables
