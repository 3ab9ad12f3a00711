from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from supatools.core.exceptions import ConfigurationMissingError


DEFAULT_CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"
DEFAULT_INVITE_COUNT = 200

# .env в корне проекта, независимо от текущей директории
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class GeneratorSettings(BaseSettings):
    """
    Настройки скрипта генерации инвайт-кодов.

    Значения берутся из переменных окружения и локального .env файла.
    Поддерживаются и имена с префиксом VITE_, которые использует фронтенд.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",  # Игнорировать лишние поля из .env
    )

    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "vite_supabase_url"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_key", "supabase_anon_key", "vite_supabase_anon_key"),
    )

    invite_count: int = Field(default=DEFAULT_INVITE_COUNT, ge=1)
    request_timeout: float = 30.0
    log_level: str = "INFO"

    def require(self) -> "GeneratorSettings":
        """Проверяет, что заданы URL и ключ, иначе ConfigurationMissingError"""
        missing = []
        if not self.supabase_url:
            missing.append("SUPABASE_URL")
        if not self.supabase_key:
            missing.append("SUPABASE_ANON_KEY")

        if missing:
            raise ConfigurationMissingError(missing)

        return self


class HandlerSettings(BaseSettings):
    """
    Настройки обработчика поиска имени пользователя.

    Ключ service role обходит RLS, поэтому он берётся только из окружения процесса.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    supabase_url: str = ""
    supabase_service_role_key: str = ""

    cors_allow_origin: str = "*"
    cors_allow_headers: str = DEFAULT_CORS_ALLOW_HEADERS
    cors_allow_methods: str = "POST, OPTIONS"

    request_timeout: float = 30.0
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
        }
