import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from birja.core.redis_cli import get_redis_client


class FakeRedis:

    def __init__(self, error=None):
        self.error = error

    async def ping(self):
        if self.error:
            raise self.error
        return True


@pytest.fixture
def use_redis(app):
    def _use(fake):
        app.dependency_overrides[get_redis_client] = lambda: fake

    return _use


def test_health_is_ok(client, session_calls):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert session_calls == []


def test_redis_health_reports_pong(client, use_redis):
    use_redis(FakeRedis())

    response = client.get("/api/health/redis")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["pong"] is True
    assert body["ms"] >= 0


def test_redis_health_reports_unavailable(client, use_redis):
    use_redis(FakeRedis(RedisConnectionError("connection refused")))

    response = client.get("/api/health/redis")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "error": "Redis not available"}
