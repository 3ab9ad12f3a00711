from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from loguru import logger

from supatools.configs.settings import HandlerSettings
from supatools.database.base import Store
from supatools.depends.store_depends import get_handler_settings, get_profile_store
from supatools.enum.errors import LookupErrorKind
from supatools.schemas.users import LookupResult
from supatools.tools.profiles.profile_tools import extract_user_id, lookup_user_name


router = APIRouter(tags=["Users"])

LOOKUP_PATH = "/"
LOOKUP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def _lookup_response(result: LookupResult, settings: HandlerSettings) -> JSONResponse:
    return JSONResponse(content=result.to_body(), status_code=result.status_code, headers=settings.cors_headers)


async def preflight(settings: Annotated[HandlerSettings, Depends(get_handler_settings)]) -> Response:
    """CORS preflight: сразу отвечаем ok, тело запроса не читаем"""
    return PlainTextResponse("ok", headers=settings.cors_headers)


async def get_user_name(
    request: Request,
    settings: Annotated[HandlerSettings, Depends(get_handler_settings)],
    store: Annotated[Store, Depends(get_profile_store)],
) -> JSONResponse:
    """
    Возвращает отображаемое имя пользователя по user_id.

    Тело запроса: {"user_id": "..."}. Ответ всегда JSON с CORS заголовками:
    400 если нет user_id, 500 при ошибке хранилища или любом другом исключении,
    иначе 200 с {"name": ...} (null если профиля или имени нет).
    """
    try:
        payload = await request.json()
        result = await lookup_user_name(store, extract_user_id(payload))
    except Exception as ex:
        logger.exception(f"Unexpected error while looking up user name: {ex}")
        result = LookupResult.failed(LookupErrorKind.UNEXPECTED, str(ex))

    return _lookup_response(result, settings)


router.add_api_route(LOOKUP_PATH, preflight, methods=["OPTIONS"], include_in_schema=False)
router.add_api_route(
    LOOKUP_PATH,
    get_user_name,
    methods=LOOKUP_METHODS,
    summary="Получить имя пользователя",
)
