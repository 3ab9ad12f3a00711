from typing import Any

from loguru import logger

from supatools.core.exceptions import StoreError
from supatools.database.base import Store
from supatools.enum.errors import LookupErrorKind
from supatools.models.profiles import UserProfile
from supatools.schemas.users import LookupResult


PROFILES_TABLE = "profiles"


def extract_user_id(payload: Any) -> str | None:
    """Достаёт user_id из тела запроса, пустые значения считаются отсутствующими"""
    if not isinstance(payload, dict):
        return None

    user_id = payload.get("user_id")
    return user_id if user_id else None


async def lookup_user_name(store: Store, user_id: Any) -> LookupResult:
    """
    Ищет имя пользователя в таблице profiles.

    Отсутствие профиля - не ошибка: возвращается name=None.
    Другие исключения не перехватываются, их обрабатывает роутер.
    """
    if not user_id:
        return LookupResult.failed(LookupErrorKind.VALIDATION, "user_id is required")

    try:
        row = await store.find_one_by_id(PROFILES_TABLE, str(user_id), columns="name")
    except StoreError as ex:
        logger.error(f"Error fetching profile: {ex.message}")
        return LookupResult.failed(LookupErrorKind.UPSTREAM, f"Failed to fetch profile: {ex.message}")

    if row is None:
        logger.info(f"No profile found for user_id: {user_id}")
        return LookupResult.found(None)

    profile = UserProfile.model_validate(row)
    logger.info(f"Profile found for user_id: {user_id}")

    return LookupResult.found(profile.name)
