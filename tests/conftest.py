import pytest
from fastapi.testclient import TestClient

from ipecho.deps import peer_address
from ipecho.main import app


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def with_peer():
    """Pretend the TCP connection came from the given "host:port"."""

    def _set(peer: str):
        app.dependency_overrides[peer_address] = lambda: peer

    yield _set
    app.dependency_overrides.clear()
