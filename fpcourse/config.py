"""Config — настройки инструментов курса

Значения берутся из переменных окружения с префиксом FPCOURSE_
или из локального .env (pydantic-settings).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CourseSettings(BaseSettings):
    """Настройки runner, CLI и интерактивной сессии."""

    model_config = SettingsConfigDict(
        env_prefix="FPCOURSE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Уровень логирования иерархии fpcourse.",
    )
    repl_prompt: str = Field(
        default="λ> ",
        min_length=1,
        description="Приглашение интерактивной сессии.",
    )
    catalog_path: Path | None = Field(
        default=None,
        description="Альтернативный каталог уроков (JSON); по умолчанию встроенный.",
    )
    show_banner: bool = Field(
        default=True,
        description="Печатать баннер при старте сессии.",
    )
    big_factorial_n: int = Field(
        default=100_000,
        ge=1,
        le=1_000_000,
        description="Аргумент демонстрации стековой безопасности в уроке рекурсии.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> CourseSettings:
    """Настройки читаются один раз на процесс."""
    return CourseSettings()
