import secrets
import string
from datetime import UTC, datetime

from pydantic import BaseModel, Field


INVITE_CODE_LENGTH = 8
INVITE_ALPHABET = string.ascii_uppercase + string.digits  # A-Z0-9, 36 символов


def generate_code(length: int = INVITE_CODE_LENGTH, alphabet: str = INVITE_ALPHABET) -> str:
    """Генерирует случайный код приглашения"""
    return "".join(secrets.choice(alphabet) for _ in range(length))


class InviteCode(BaseModel):
    """Одноразовый инвайт-код из таблицы invite_codes"""

    code: str = Field(min_length=INVITE_CODE_LENGTH, max_length=INVITE_CODE_LENGTH, pattern=r"^[A-Z0-9]+$")
    is_used: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_row(self) -> dict:
        """Строка для вставки через REST API (created_at в ISO-8601)"""
        return self.model_dump(mode="json")

    def __repr__(self) -> str:
        return f"<InviteCode(code={self.code}, used={self.is_used})>"
