import os

# Keep the slowapi default limit out of the way of the API tests
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "10000")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from scripture_ai.main import app

    with TestClient(app) as c:
        yield c
