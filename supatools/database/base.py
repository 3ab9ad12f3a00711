from typing import Any, Protocol


class Store(Protocol):
    """
    Минимальный контракт хранилища, который нужен скриптам и обработчикам.

    Реальная реализация - SupabaseRestClient, в тестах подставляется in-memory фейк.
    """

    async def find_one_by_id(self, table: str, record_id: str, columns: str = "*") -> dict[str, Any] | None:
        """Возвращает одну запись с указанным id или None"""
        ...

    async def bulk_insert(self, table: str, rows: list[dict[str, Any]]) -> None:
        """Вставляет все строки одним запросом"""
        ...
