"""
Logger — настройка иерархии логгеров fpcourse.

Вывод уроков принадлежит stdout, поэтому обработчик пишет в stderr.
Модули получают логгеры через logging.getLogger(__name__); уровень задаёт
CLI при старте (CourseSettings.log_level или --log-level).
"""

import logging
import sys
from typing import Final, Optional

from fpcourse.config import LOG_LEVELS

__all__ = ["LOG_FORMAT", "setup_logger"]

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "fpcourse",
    level: str = "WARNING",
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка логгера: один обработчик stderr, без распространения к root.

    Повторный вызов не добавляет обработчиков, только меняет уровень.

    Args:
        name: Имя логгера (корень иерархии — "fpcourse")
        level: Уровень из LOG_LEVELS, регистр не важен
        format_string: Формат строки лога вместо LOG_FORMAT

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если уровень не входит в LOG_LEVELS
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {LOG_LEVELS}")

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string or LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.getLevelName(level_name))

    return logger
