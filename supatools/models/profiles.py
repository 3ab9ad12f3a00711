from pydantic import BaseModel


class UserProfile(BaseModel):
    """Профиль пользователя. Таблицей profiles владеет внешняя система, здесь только чтение."""

    id: str | None = None
    name: str | None = None
