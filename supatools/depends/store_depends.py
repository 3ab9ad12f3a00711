"""
Dependency injection для настроек и клиента хранилища.

Настройки читаются из окружения на каждый запрос, клиент закрывается после ответа.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from loguru import logger

from supatools.configs.settings import HandlerSettings
from supatools.database.base import Store
from supatools.database.rest_client import SupabaseRestClient


def get_handler_settings() -> HandlerSettings:
    return HandlerSettings()


async def get_profile_store(
    settings: Annotated[HandlerSettings, Depends(get_handler_settings)],
) -> AsyncGenerator[Store]:
    """
    Предоставляет клиент Supabase с ключом service role.

    Пустые URL/ключ не прерывают запрос: ошибка всплывёт при обращении к хранилищу.
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        logger.warning("SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set")

    async with SupabaseRestClient(
        settings.supabase_url,
        settings.supabase_service_role_key,
        timeout=settings.request_timeout,
    ) as client:
        yield client
