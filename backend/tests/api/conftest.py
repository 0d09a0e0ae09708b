"""API test fixtures — FastAPI app + httpx client over real or fake persistence.

Invariants:
    - client: app.state.db_manager points at the per-test in-memory SQLite engine
    - fake_client: get_user_repository overridden with FakeUserRepository
    - Lifespan is not run by ASGITransport; state is injected directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.api.deps import get_user_repository
from user_api.config import Settings
from user_api.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    ))


@pytest.fixture
async def client(app, db_manager):
    """Client backed by the SQLAlchemy repository on SQLite."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def fake_client(app, fake_repository):
    """Client whose handlers talk to the in-memory fake repository."""
    app.dependency_overrides[get_user_repository] = lambda: fake_repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
