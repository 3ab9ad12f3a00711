from collections.abc import Awaitable, Callable
from uuid import uuid4

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from loguru import logger

from supatools.configs.settings import HandlerSettings


# Заголовки по умолчанию, без чтения окружения: сами настройки тоже могут быть причиной ошибки
FALLBACK_CORS_HEADERS = HandlerSettings.model_construct().cors_headers


def _fallback_headers() -> dict[str, str]:
    try:
        return HandlerSettings().cors_headers
    except Exception as ex:
        logger.warning(f"Handler settings are invalid, using default CORS headers: {ex}")
        return FALLBACK_CORS_HEADERS


async def log_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """
    Логирует каждый запрос под своим log_id.

    Исключение, не перехваченное роутером, превращается в 500 {"error": ...} с CORS заголовками.
    """
    route = f"{request.method} {request.url.path}"

    with logger.contextualize(log_id=str(uuid4())):
        logger.info(f"-> {route}")

        try:
            response = await call_next(request)
        except Exception as ex:
            logger.opt(exception=ex).error(f"✗ {route} ERROR: {ex}")
            return JSONResponse(content={"error": str(ex)}, status_code=500, headers=_fallback_headers())

        if response.status_code >= 400:
            logger.warning(f"← {route} [{response.status_code}] FAILED")
        else:
            logger.info(f"← {route} [{response.status_code}] SUCCESS")

        return response
