"""
Фикстуры для тестирования.

Использует pytest-asyncio для асинхронных тестов и httpx для HTTP запросов.
Хранилище подменяется in-memory фейком через dependency_overrides.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from supatools.configs.settings import HandlerSettings
from supatools.core.exceptions import StoreError
from supatools.main import app


class FakeStore:
    """
    In-memory хранилище с тем же контрактом, что и SupabaseRestClient.

    error - если задан, любой запрос падает с этим StoreError.
    """

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = tables or {}
        self.error: StoreError | None = None
        self.find_calls: list[tuple[str, str, str]] = []
        self.insert_calls: list[tuple[str, list[dict[str, Any]]]] = []

    async def __aenter__(self) -> "FakeStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def find_one_by_id(self, table: str, record_id: str, columns: str = "*") -> dict[str, Any] | None:
        self.find_calls.append((table, record_id, columns))
        if self.error:
            raise self.error

        for row in self.tables.get(table, []):
            if row.get("id") == record_id:
                if columns == "*":
                    return dict(row)
                return {column.strip(): row.get(column.strip()) for column in columns.split(",")}
        return None

    async def bulk_insert(self, table: str, rows: list[dict[str, Any]]) -> None:
        self.insert_calls.append((table, rows))
        if self.error:
            raise self.error

        self.tables.setdefault(table, []).extend(rows)


@pytest.fixture
def fake_store() -> FakeStore:
    """Хранилище с двумя профилями: u1 с именем и u2 без имени"""
    return FakeStore(
        {
            "profiles": [
                {"id": "u1", "name": "Alice", "email": "alice@example.com"},
                {"id": "u2", "name": None, "email": "bob@example.com"},
                {"id": "u3", "name": "", "email": "carol@example.com"},
            ]
        }
    )


@pytest.fixture
def handler_settings() -> HandlerSettings:
    return HandlerSettings(
        _env_file=None,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="service-role-key",
    )


@pytest_asyncio.fixture(scope="function")
async def client(fake_store: FakeStore, handler_settings: HandlerSettings) -> AsyncGenerator[AsyncClient]:
    """
    Создаёт HTTP клиент для тестирования обработчика.

    Подменяет зависимости get_profile_store и get_handler_settings.
    """
    from supatools.depends.store_depends import get_handler_settings, get_profile_store

    async def override_get_store() -> AsyncGenerator[FakeStore]:
        yield fake_store

    app.dependency_overrides[get_profile_store] = override_get_store
    app.dependency_overrides[get_handler_settings] = lambda: handler_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def empty_store() -> FakeStore:
    return FakeStore()


@pytest_asyncio.fixture(scope="function")
async def settings_client(fake_store: FakeStore) -> AsyncGenerator[AsyncClient]:
    """
    HTTP клиент, в котором настройки читаются из окружения как в проде.

    Подменяется только хранилище.
    """
    from supatools.depends.store_depends import get_profile_store

    async def override_get_store() -> AsyncGenerator[FakeStore]:
        yield fake_store

    app.dependency_overrides[get_profile_store] = override_get_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
