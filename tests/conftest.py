import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for `import flisol`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)


class FakeSession:
    """Records executed statements and serves canned rows."""

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.statements = []
        self.closed = False

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.error is not None:
            raise self.error
        return FakeResult(self.rows)

    async def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def make_session():
    return FakeSession


@pytest.fixture()
def fake_session():
    return FakeSession(rows=[
        {"title": "Install fest", "uri": "public://images/install.png"},
        {"title": "Talks", "uri": "public://2024-04/talks.jpg"},
    ])


@pytest.fixture()
def client(monkeypatch, fake_session):
    # Patch engine init/close in lifespan to no-op
    import flisol.db.sa as db_sa

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)

    from flisol import main as main_mod
    from flisol.core import deps as core_deps
    from flisol.services.files import PublicPathResolver

    async def _session():
        yield fake_session

    app = main_mod.app
    app.dependency_overrides[db_sa.get_session] = _session
    app.dependency_overrides[core_deps.get_path_resolver] = lambda: PublicPathResolver("/sites/default/files/")

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
