"""
Тесты для настроек и логгера

Проверяет:
1. Значения по умолчанию
2. Переопределение через переменные окружения FPCOURSE_*
3. Валидацию уровня логирования и границ big_factorial_n
"""

import importlib
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from fpcourse.config import CourseSettings, get_settings
import fpcourse.logger
from fpcourse.logger import setup_logger


class TestCourseSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "REPL_PROMPT", "CATALOG_PATH", "SHOW_BANNER", "BIG_FACTORIAL_N"):
            monkeypatch.delenv(f"FPCOURSE_{name}", raising=False)
        settings = CourseSettings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.repl_prompt == "λ> "
        assert settings.catalog_path is None
        assert settings.show_banner is True
        assert settings.big_factorial_n == 100_000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FPCOURSE_LOG_LEVEL", "debug")
        monkeypatch.setenv("FPCOURSE_CATALOG_PATH", "/tmp/catalog.json")
        monkeypatch.setenv("FPCOURSE_BIG_FACTORIAL_N", "500")
        settings = CourseSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.catalog_path == Path("/tmp/catalog.json")
        assert settings.big_factorial_n == 500

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            CourseSettings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("n", [0, 2_000_000])
    def test_big_factorial_bounds(self, n):
        with pytest.raises(ValidationError):
            CourseSettings(_env_file=None, big_factorial_n=n)

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestLogger:
    def test_setup_logger_level(self):
        log = setup_logger("fpcourse.test_config", level="debug")
        assert log.level == logging.DEBUG
        assert not log.propagate

    def test_single_handler(self):
        setup_logger("fpcourse.test_config_handlers", level="INFO")
        log = setup_logger("fpcourse.test_config_handlers", level="ERROR")
        assert len(log.handlers) == 1
        assert log.level == logging.ERROR

    def test_invalid_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logger("fpcourse.test_config_invalid", level="verbose")

    def test_import_ignores_environment(self, monkeypatch):
        """Импорт модуля не настраивает логгер и не читает FPCOURSE_LOG_LEVEL."""
        monkeypatch.setenv("FPCOURSE_LOG_LEVEL", "verbose")
        module = importlib.reload(fpcourse.logger)
        assert not hasattr(module, "logger")
