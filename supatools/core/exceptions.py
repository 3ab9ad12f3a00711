class SupatoolsError(Exception):
    """Базовый класс для ошибок supatools."""

    pass


class ConfigurationMissingError(SupatoolsError):
    """Не задан обязательный параметр подключения к хранилищу."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required configuration: {', '.join(missing)}")


class StoreError(SupatoolsError):
    """Хранилище вернуло ошибку или оказалось недоступно."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class CodeGenerationError(SupatoolsError):
    """Не удалось набрать нужное количество уникальных кодов."""

    pass
