"""
database/models/base.py
========================
Single source of truth for Base, Engine and SessionFactory.

Principles:
  - one Base for the whole project
  - one Engine (singleton), never re-created per call
  - get_session_local() always returns the same sessionmaker
  - expire_on_commit=False : objects stay readable after the session closes
"""

from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine

Base = declarative_base()

_engine       = None
_SessionLocal = None


def get_engine():
    """
    Return the shared engine, creating it on first use from
    Config().database_url().
    """
    global _engine
    if _engine is None:
        from core.config import Config
        url = Config().database_url()
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        _engine = create_engine(url, echo=False, future=True, connect_args=connect_args)
    return _engine


def get_session_local():
    """
    Return the shared sessionmaker.

    Usage:
        # inside a CRUD (through the get_session context manager):
        super().__init__(MyModel, get_session_local)   ← the callable, no ()

        # directly:
        with get_session_local()() as session:          ← ()() opens a session
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def reset_engine():
    """
    Dispose the engine and sessionmaker.
    Only needed when the database URL changes at runtime.
    """
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine       = None
    _SessionLocal = None
