"""Shared test fixtures for all test modules."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from apps.biztime.core import db as db_module
from apps.biztime.core.db import Base
from apps.biztime.main import app
from apps.biztime.models.company_model import Company
from apps.biztime.models.invoice_model import Invoice

# In-memory SQLite engine with StaticPool so every session, including the
# ones opened by request handlers, sees the same database.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop them after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)

    yield

    Base.metadata.drop_all(bind=_test_engine)

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    session = _TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def companies(db_session):
    """The apple/ibm pair most tests start from."""
    rows = [
        Company(code="apple", name="Apple Inc", description="Maker of iPhones"),
        Company(code="ibm", name="IBM", description="Big Blue"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def invoices(db_session, companies):
    """Two unpaid invoices for apple; returns their ids."""
    rows = [Invoice(comp_code="apple", amt=500), Invoice(comp_code="apple", amt=300)]
    db_session.add_all(rows)
    db_session.commit()
    return [row.id for row in rows]
