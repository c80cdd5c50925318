from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def fixed_now() -> datetime:
    """Provide a fixed evaluation instant for date rules."""
    return datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    from task_management.main import app

    with TestClient(app) as client:
        yield client

    # Clear overrides after test
    app.dependency_overrides.clear()
