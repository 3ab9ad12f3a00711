from loguru import logger

from supatools.configs.settings import DEFAULT_INVITE_COUNT
from supatools.core.exceptions import CodeGenerationError
from supatools.database.base import Store
from supatools.models.invites import InviteCode, generate_code


INVITE_TABLE = "invite_codes"
MAX_ATTEMPTS_FACTOR = 10  # Запас попыток на коллизии: 36^8 вариантов, на практике хватает count


def generate_unique_codes(count: int = DEFAULT_INVITE_COUNT, max_attempts: int | None = None) -> list[str]:
    """
    Генерирует count уникальных кодов.

    Порядок генерации сохраняется, чтобы превью показывало первые созданные коды.

    Raises:
        ValueError: count меньше 1
        CodeGenerationError: За max_attempts попыток не набралось count уникальных кодов
    """
    if count < 1:
        raise ValueError("count must be at least 1")

    if max_attempts is None:
        max_attempts = count * MAX_ATTEMPTS_FACTOR

    codes: dict[str, None] = {}
    attempts = 0

    while len(codes) < count:
        if attempts >= max_attempts:
            raise CodeGenerationError(
                f"Generated only {len(codes)} of {count} unique codes in {max_attempts} attempts"
            )
        attempts += 1
        codes[generate_code()] = None

    if attempts > count:
        logger.debug(f"Коллизий при генерации: {attempts - count}")

    return list(codes)


def build_invite_records(codes: list[str]) -> list[InviteCode]:
    """Каждая запись получает свой created_at в момент создания"""
    return [InviteCode(code=code) for code in codes]


async def create_invite_codes(store: Store, count: int = DEFAULT_INVITE_COUNT) -> list[str]:
    """
    Генерирует инвайт-коды и вставляет их одним запросом.

    Уникальность проверяется только внутри партии. Ошибки хранилища пробрасываются как есть.
    """
    codes = generate_unique_codes(count)
    records = build_invite_records(codes)

    logger.info(f"Вставка {len(records)} инвайт-кодов в {INVITE_TABLE}")
    await store.bulk_insert(INVITE_TABLE, [record.to_row() for record in records])
    logger.info(f"✅ Создано {len(records)} инвайт-кодов")

    return codes
