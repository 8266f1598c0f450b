"""Shared test fixtures for the catalog manager test suite."""

from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_manager.config import Settings
from catalog_manager.models.database import create_tables
from catalog_manager.schemas.product import ProductDraft
from catalog_manager.services.storage_service import StorageService
from catalog_manager.services.workspace import CatalogWorkspace

TODAY = date(2024, 5, 1)


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, seconds: float = 1.0) -> None:
        self.moment += timedelta(seconds=seconds)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def storage(session_factory):
    return StorageService(session_factory)


@pytest.fixture
def config():
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 5, 1, 14, 30, 0))


@pytest.fixture
def make_workspace(session_factory, config, clock):
    """Build a workspace over the test database, reading whatever is stored."""

    def _make():
        return CatalogWorkspace(
            session_factory,
            config=config,
            clock=clock,
            today=lambda: TODAY,
        )

    return _make


@pytest.fixture
def workspace(make_workspace):
    """Workspace seeded with the default collections."""
    return make_workspace()


@pytest.fixture
def empty_workspace(storage, config, make_workspace):
    """Workspace whose three collections are stored empty."""
    for collection in ("products", "history", "categories"):
        storage.save(config.storage_key(collection), "[]")
    return make_workspace()


@pytest.fixture
def draft():
    """A valid product draft."""
    return ProductDraft(
        sku="MUG-001",
        name="Ceramic Coffee Mug",
        description="Dishwasher safe stoneware mug.",
        short_description="12oz mug",
        price="12.50",
        category="Home & Garden > Kitchen",
        tags="mug,coffee",
        brand="HomeGoods",
        seo_description="A sturdy ceramic mug for your morning coffee.",
        focus_keyword="coffee mug",
    )


@pytest.fixture
def client(workspace):
    """FastAPI test client bound to the test workspace."""
    from catalog_manager.main import app

    app.state.workspace = workspace
    with TestClient(app) as test_client:
        yield test_client
    app.state.workspace = None
