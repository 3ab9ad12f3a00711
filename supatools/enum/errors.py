from enum import Enum


class LookupErrorKind(str, Enum):
    """
    Виды ошибок при поиске имени пользователя.
    """

    VALIDATION = "validation"  # В запросе нет user_id
    UPSTREAM = "upstream"  # Хранилище вернуло ошибку
    UNEXPECTED = "unexpected"  # Любое другое исключение

    def __str__(self) -> str:
        return self.value

    @property
    def status_code(self) -> int:
        """HTTP статус, которым отвечает обработчик"""
        status_map = {
            self.VALIDATION: 400,
            self.UPSTREAM: 500,
            self.UNEXPECTED: 500,
        }
        return status_map.get(self, 500)
