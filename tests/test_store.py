import asyncio
import importlib
from unittest.mock import MagicMock, patch

from birja.core import settings as settings_module
from birja.core.store import StoreManager


def test_create_all_is_off_by_default(monkeypatch):
    monkeypatch.delenv("DB_CREATE_ALL", raising=False)

    reloaded = importlib.reload(settings_module)

    assert reloaded.settings.DB_CREATE_ALL is False


def test_connect_leaves_schema_to_migrations():
    store = StoreManager()
    store.postgres = MagicMock()

    with patch("birja.core.store.settings.DB_CREATE_ALL", False):
        asyncio.run(store.connect())

    store.postgres.connect.assert_not_called()
