"""
Contract Validation Module

Модуль для валидации JSON контрактов курса (каталог уроков).
"""

from .validators import (
    ContractValidator,
    LessonCatalogValidator,
    SchemaLoader,
    validate_lesson_catalog,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LessonCatalogValidator",
    # Functions
    "validate_lesson_catalog",
]
