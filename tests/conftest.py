"""
- Give every test a fresh in-memory GameStore.
- Override FastAPI's get_store so routes use that store.
- Provide a client fixture (TestClient(app)) that already has the override applied.
- Provide a fixed_secret fixture to make the secret predictable.
"""
import os
import random
import pytest

from fastapi.testclient import TestClient

# Keep defaults stable no matter what a local .env says
os.environ["APP_ENV"] = "test"
os.environ.pop("MASTERMIND_CODE_LENGTH", None)
os.environ.pop("MASTERMIND_MAX_ATTEMPTS", None)
os.environ.pop("MASTERMIND_ALLOW_DUPLICATES", None)

from mastermind import session as session_module
from mastermind.config import configure
from mastermind.main import app, get_store
from mastermind.palette import DEFAULT_PALETTE
from mastermind.store import GameStore


@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def config():
    """Classic game: 4 pegs, 10 attempts, duplicates allowed, 6 colors."""
    return configure(length=4, max_attempts=10, allow_duplicates=True, palette=DEFAULT_PALETTE)

@pytest.fixture
def fixed_secret(monkeypatch):
    """
    Returns a setter: fixed_secret(("r", "b", "g", "y")) makes every new game
    use that secret (patched where session.py looks it up).
    """
    def _set(secret):
        def fake_generate_code(palette, length, allow_duplicates, rng=None):
            return tuple(secret)
        monkeypatch.setattr(session_module, "generate_code", fake_generate_code)
    return _set

@pytest.fixture
def store():
    return GameStore()

@pytest.fixture(autouse=True)
def override_store(store):
    """Force the app to use our fresh store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)
