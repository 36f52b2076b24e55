"""API test fixtures — FastAPI test client.

Invariants:
    - get_db dependency overridden to use the test DB session (see root conftest)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blackslope.db.session import get_db
from blackslope.main import app


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
