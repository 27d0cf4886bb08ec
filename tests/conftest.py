import os

# Configure the app for tests before any bill_bot module reads the environment
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LLM_FALLBACK_ENABLED"] = "false"
os.environ["SEED_MENU_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import bill_bot.config as config_mod
import bill_bot.db as db
from bill_bot.main import app
from bill_bot.models import Base
from bill_bot.seed_menu import SHOP_CATALOG, build_menu_items, seed_menu
from bill_bot.services.billing import clear_llm_cache

# Test admin credentials
TEST_ADMIN_USERNAME = "testadmin"
TEST_ADMIN_PASSWORD = "testpassword123"


def _make_session_factory(seed: bool = True):
    """In-memory SQLite session factory; StaticPool shares one connection."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    if seed:
        session = TestingSessionLocal()
        seed_menu(session)
        session.close()

    return engine, TestingSessionLocal


@pytest.fixture(autouse=True)
def _clean_llm_cache():
    clear_llm_cache()
    yield
    clear_llm_cache()


@pytest.fixture
def db_session():
    """A session over a fresh in-memory database seeded with the hotel menu."""
    engine, TestingSessionLocal = _make_session_factory()
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(monkeypatch):
    """Shared FastAPI TestClient using an in-memory SQLite DB.

    Uses StaticPool so all connections share the same in-memory database.
    Seeds the default hotel menu and sets test admin credentials.
    """
    monkeypatch.setattr(config_mod, "ADMIN_USERNAME", TEST_ADMIN_USERNAME)
    monkeypatch.setattr(config_mod, "ADMIN_PASSWORD", TEST_ADMIN_PASSWORD)

    engine, TestingSessionLocal = _make_session_factory()

    # Patch the db module used by the app
    monkeypatch.setattr(db, "engine", engine)
    monkeypatch.setattr(db, "SessionLocal", TestingSessionLocal)

    # Override FastAPI DB dependency
    def override_get_db():
        db_sess = TestingSessionLocal()
        try:
            yield db_sess
        finally:
            db_sess.close()

    app.dependency_overrides[db.get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def admin_auth():
    """Returns HTTP Basic Auth tuple for admin endpoints."""
    return (TEST_ADMIN_USERNAME, TEST_ADMIN_PASSWORD)


@pytest.fixture
def hotel_catalog():
    """The default hotel menu as parser catalog entries."""
    return [item.to_catalog_item() for item in build_menu_items()]


@pytest.fixture
def shop_catalog():
    return list(SHOP_CATALOG)
