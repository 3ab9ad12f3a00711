"""
Клиент для Data API Supabase (PostgREST).

Работает поверх httpx, все ошибки хранилища приводятся к StoreError.
"""

from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from supatools.core.exceptions import StoreError


REST_PATH = "/rest/v1"
DEFAULT_TIMEOUT = 30.0


class SupabaseRestClient:
    """
    Асинхронный клиент таблиц Supabase.

    Args:
        url: URL проекта, например https://xyz.supabase.co
        key: anon или service role ключ
        timeout: Таймаут запросов в секундах
        transport: Транспорт httpx (в тестах - httpx.MockTransport)
    """

    def __init__(
        self,
        url: str,
        key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=url.rstrip("/") + REST_PATH,
            timeout=timeout,
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
                "X-Client-Info": "supatools/0.1",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "SupabaseRestClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()

    async def find_one_by_id(self, table: str, record_id: str, columns: str = "*") -> dict[str, Any] | None:
        """
        Ищет одну запись по колонке id.

        Пустой результат - это не ошибка, возвращается None.

        Raises:
            StoreError: Ошибка соединения или ответ PostgREST с кодом >= 400
        """
        logger.debug(f"GET {table} id={record_id} select={columns}")

        response = await self._request(
            "GET",
            f"/{table}",
            params={"select": columns, "id": f"eq.{record_id}", "limit": 1},
        )
        rows = response.json()

        return rows[0] if rows else None

    async def bulk_insert(self, table: str, rows: list[dict[str, Any]]) -> None:
        """
        Вставляет все строки одним POST запросом.

        Атомарность вставки обеспечивает сама БД.

        Raises:
            StoreError: Ошибка соединения или ответ PostgREST с кодом >= 400
        """
        logger.debug(f"POST {table}: {len(rows)} rows")

        await self._request("POST", f"/{table}", json=rows, headers={"Prefer": "return=minimal"})

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as ex:
            logger.error(f"✗ {method} {endpoint} failed: {ex}")
            raise StoreError(str(ex) or type(ex).__name__) from ex

        if response.is_error:
            error = _parse_error(response)
            logger.error(f"✗ {method} {endpoint} [{response.status_code}]: {error.message}")
            raise error

        return response


def _parse_error(response: httpx.Response) -> StoreError:
    """Достаёт message/code из тела ошибки PostgREST"""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return StoreError(body["message"], status_code=response.status_code, code=body.get("code"))

    message = response.text or response.reason_phrase or f"HTTP {response.status_code}"
    return StoreError(message, status_code=response.status_code)
