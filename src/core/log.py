"""
Logging — централизованные хелперы

Библиотека не настраивает logging при импорте: модули только получают
логгеры через get_logger (src.core.domain.point пишет DEBUG-записи).

setup_logging — точка входа для вызывающего кода (приложений и скриптов,
использующих пакет): внутри пакета она не вызывается. Вызывается один раз,
например setup_logging(logging.DEBUG), чтобы увидеть записи о нефинитных
масштабах в Point.multiply / Point.divide.
"""

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """
    Настройка корневого логгера: один консольный handler.

    Повторные вызовы ничего не делают.

    Args:
        level: Уровень логирования (default: INFO)
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
