"""Catalog — описание уроков курса

catalog.json перечисляет уроки в порядке курса: id, slug, заголовок, темы,
модуль и ожидаемый вывод. Файл валидируется JSON Schema контрактом
lesson_catalog и разбирается в immutable Pydantic модели.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from fpcourse.core.contracts import validate_lesson_catalog
from fpcourse.core.errors import LessonNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.json"


# =============================================================================
# MODELS
# =============================================================================


class LessonInfo(BaseModel):
    """Запись каталога об одном уроке."""

    id: int = Field(..., ge=1, description="Номер урока в курсе")
    slug: str = Field(..., min_length=1, description="Короткое имя для CLI")
    title: str = Field(..., min_length=1)
    topics: Tuple[str, ...] = Field(..., min_length=1)
    module: str = Field(..., description="Имя модуля в пакете fpcourse.lessons")
    expected_output: Optional[Tuple[str, ...]] = Field(
        None, description="Ожидаемые строки вывода; None — вывод не сравнивается"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("module")
    @classmethod
    def validate_module_prefix(cls, v: str) -> str:
        """Модуль урока называется lesson_NN_<slug>."""
        if not v.startswith("lesson_"):
            raise ValueError(f"lesson module must start with 'lesson_', got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_module_matches(self) -> "LessonInfo":
        expected = f"lesson_{self.id:02d}_{self.slug}"
        if self.module != expected:
            raise ValueError(f"lesson {self.id}: module {self.module!r} does not match {expected!r}")
        return self

    @property
    def qualified_module(self) -> str:
        return f"fpcourse.lessons.{self.module}"


class Catalog(BaseModel):
    """Упорядоченный список уроков."""

    lessons: Tuple[LessonInfo, ...]

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_unique(self) -> "Catalog":
        ids = [lesson.id for lesson in self.lessons]
        slugs = [lesson.slug for lesson in self.lessons]
        if len(set(ids)) != len(ids):
            raise ValueError("lesson ids must be unique")
        if len(set(slugs)) != len(slugs):
            raise ValueError("lesson slugs must be unique")
        return self

    def ordered(self) -> List[LessonInfo]:
        return sorted(self.lessons, key=lambda lesson: lesson.id)

    def find(self, key: str) -> LessonInfo:
        """
        Поиск урока по id ("4", "04") или slug ("recursion").

        Raises:
            LessonNotFoundError: если урока нет
        """
        by_slug: Dict[str, LessonInfo] = {lesson.slug: lesson for lesson in self.lessons}
        if key in by_slug:
            return by_slug[key]
        if key.isdigit():
            for lesson in self.lessons:
                if lesson.id == int(key):
                    return lesson
        raise LessonNotFoundError(key)


# =============================================================================
# LOADING
# =============================================================================


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Загрузка и валидация каталога.

    Args:
        path: Путь к JSON; по умолчанию каталог из пакета

    Raises:
        jsonschema.ValidationError: данные не соответствуют контракту
        pydantic.ValidationError: нарушены инварианты моделей
    """
    path = path or DEFAULT_CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_lesson_catalog(data)
    catalog = Catalog.model_validate({"lessons": data["lessons"]})
    logger.info("Loaded %d lessons from %s", len(catalog.lessons), path)
    return catalog
