"""Runner — запуск уроков и сверка вывода с каталогом

Порядок:
1. Урок находится в каталоге по id или slug
2. Модуль урока импортируется, вызывается run()
3. Вывод сравнивается с expected_output (если он задан)

run_lesson не перехватывает ошибки урока. check_lesson записывает исключение
урока в LessonCheck.error, чтобы сверка дошла до конца каталога.
"""

import difflib
import importlib
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fpcourse.lessons.base import LessonResult
from fpcourse.lessons.catalog import Catalog, LessonInfo, load_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LessonCheck:
    """Результат сверки вывода урока."""

    lesson: LessonInfo
    result: Optional[LessonResult]

    # False при расхождении или исключении; уроки без expected_output не сверяются
    passed: bool
    compared: bool

    # unified diff ожидаемого и фактического вывода
    diff: Tuple[str, ...]

    # "Type: message" исключения, которым завершился урок
    error: Optional[str] = None


def run_lesson(lesson: LessonInfo) -> LessonResult:
    """Импорт модуля урока и вызов run()."""
    module = importlib.import_module(lesson.qualified_module)
    logger.debug("Running lesson %d (%s)", lesson.id, lesson.slug)
    result = module.run()
    if result.lesson_id != lesson.id:
        raise RuntimeError(
            f"module {lesson.module} reports lesson {result.lesson_id}, catalog says {lesson.id}"
        )
    return result


def check_lesson(lesson: LessonInfo) -> LessonCheck:
    try:
        result = run_lesson(lesson)
    except Exception as exc:
        logger.warning("Lesson %d (%s) raised %s: %s", lesson.id, lesson.slug, type(exc).__name__, exc)
        return LessonCheck(
            lesson=lesson,
            result=None,
            passed=False,
            compared=lesson.expected_output is not None,
            diff=(),
            error=f"{type(exc).__name__}: {exc}",
        )

    if lesson.expected_output is None:
        return LessonCheck(lesson=lesson, result=result, passed=True, compared=False, diff=())

    expected = list(lesson.expected_output)
    actual = list(result.output)
    if expected == actual:
        return LessonCheck(lesson=lesson, result=result, passed=True, compared=True, diff=())

    diff = tuple(
        difflib.unified_diff(expected, actual, fromfile="expected", tofile="actual", lineterm="")
    )
    logger.warning("Lesson %d (%s): output differs from catalog", lesson.id, lesson.slug)
    return LessonCheck(lesson=lesson, result=result, passed=False, compared=True, diff=diff)


def check_all(catalog: Optional[Catalog] = None) -> List[LessonCheck]:
    """Сверка всех уроков в порядке курса."""
    catalog = catalog or load_catalog()
    return [check_lesson(lesson) for lesson in catalog.ordered()]
