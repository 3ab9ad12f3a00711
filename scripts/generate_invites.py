#!/usr/bin/env python3
"""
Скрипт для генерации invite кодов и вставки их в таблицу invite_codes Supabase

# Генерация 200 кодов (по умолчанию)
python scripts/generate_invites.py

# Другое количество
python scripts/generate_invites.py --count 50

URL и ключ берутся из .env: SUPABASE_URL и SUPABASE_ANON_KEY (или VITE_SUPABASE_*).
"""

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from pathlib import Path

# Добавляем корень проекта в путь
sys.path.append(str(Path(__file__).parent.parent))

from supatools.configs.logging import configure_logging
from supatools.configs.settings import GeneratorSettings
from supatools.core.exceptions import ConfigurationMissingError
from supatools.database.base import Store
from supatools.database.rest_client import SupabaseRestClient
from supatools.tools.invite.invite_tools import create_invite_codes


PREVIEW_SIZE = 5

StoreFactory = Callable[[GeneratorSettings], AbstractAsyncContextManager[Store]]


def open_store(settings: GeneratorSettings) -> SupabaseRestClient:
    return SupabaseRestClient(settings.supabase_url, settings.supabase_key, timeout=settings.request_timeout)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Генерация invite кодов")
    parser.add_argument("--count", type=int, default=None, help="Количество кодов для генерации")
    return parser.parse_args(argv)


async def main(
    argv: Sequence[str] | None = None,
    settings: GeneratorSettings | None = None,
    store_factory: StoreFactory = open_store,
) -> int:
    """Главная функция. Возвращает код выхода процесса"""
    args = parse_args(argv)

    try:
        settings = (settings or GeneratorSettings()).require()
    except ConfigurationMissingError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    count = args.count if args.count is not None else settings.invite_count

    try:
        async with store_factory(settings) as store:
            codes = await create_invite_codes(store, count)
    except Exception as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    print(f"Successfully generated and inserted {len(codes)} invite codes")
    print(f"First {PREVIEW_SIZE} codes as preview: {codes[:PREVIEW_SIZE]}")

    return 0


if __name__ == "__main__":
    _settings = GeneratorSettings()
    configure_logging(_settings.log_level)
    sys.exit(asyncio.run(main(settings=_settings)))
