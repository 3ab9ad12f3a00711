from pydantic import BaseModel

from supatools.enum.errors import LookupErrorKind


class UserNameResponse(BaseModel):
    """Ответ с именем пользователя"""

    name: str | None = None


class ErrorResponse(BaseModel):
    """Ответ с описанием ошибки"""

    error: str


class LookupResult(BaseModel):
    """
    Результат поиска имени: либо name, либо ошибка с видом и сообщением.

    В HTTP ответ превращается на уровне роутера.
    """

    name: str | None = None
    error_kind: LookupErrorKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def status_code(self) -> int:
        return 200 if self.error_kind is None else self.error_kind.status_code

    @classmethod
    def found(cls, name: str | None) -> "LookupResult":
        return cls(name=name or None)

    @classmethod
    def failed(cls, kind: LookupErrorKind, message: str) -> "LookupResult":
        return cls(error_kind=kind, error=message)

    def to_body(self) -> dict:
        if self.ok:
            return UserNameResponse(name=self.name).model_dump()
        return ErrorResponse(error=self.error or "").model_dump()
