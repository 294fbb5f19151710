import asyncio
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_CREATE_ALL"] = "false"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["REDIS_URL"] = "redis://127.0.0.1:6399/0"
for _name in ("CF_ACCOUNT_ID", "CF_IMAGES_TOKEN", "CF_IMAGES_ACCOUNT_HASH"):
    os.environ.pop(_name, None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from birja.core.databases import DatabaseSessionManager, get_session
from birja.models import Base
from main import create_app


@pytest.fixture
def db(tmp_path):
    db_path = tmp_path / "birja.db"
    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return DatabaseSessionManager(f"sqlite+aiosqlite:///{db_path}", {"poolclass": NullPool})


@pytest.fixture
def session_calls():
    return []


@pytest.fixture
def app(db, session_calls):
    app = create_app()

    async def override_get_session():
        session_calls.append(1)
        async with db.session() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def run_db(db):
    """Run ``fn(session)`` against the test database outside of a request."""

    def _run(fn):
        async def _inner():
            async with db.session() as session:
                return await fn(session)

        return asyncio.run(_inner())

    return _run


@pytest.fixture
def make_employer(client):
    def _make(username="acme", password="pw123"):
        register = client.post("/api/auth/register", json={"username": username, "password": password})
        assert register.status_code == 200, register.text
        login = client.post("/api/auth/login", json={"username": username, "password": password})
        assert login.status_code == 200, login.text
        body = login.json()
        return {
            "user": body["user"],
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _make


@pytest.fixture
def employer(make_employer):
    return make_employer()


@pytest.fixture
def make_vacancy(client):
    def _make(headers, **overrides):
        payload = {"title": "Driver", "text": "desc", "region": "City", **overrides}
        response = client.post("/api/employer/vacancies", json=payload, headers=headers)
        assert response.status_code == 200, response.text
        return response.json()

    return _make
