import sys

from loguru import logger


LOG_FORMAT = "Log: [{extra[log_id]}:{time} - {level} - {message}]"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Настраивает sink'и loguru.

    log_id по умолчанию "-", внутри запроса его подменяет log_middleware.
    """
    logger.remove()
    logger.configure(extra={"log_id": "-"})
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    if log_file:
        logger.add(log_file, format=LOG_FORMAT, level=level, enqueue=True)
