"""Lessons — уроки курса, каждый — самостоятельная программа.

- LESSON 1: Environment (компиляция и запуск первой программы)
- LESSON 2: Bindings (связывания, let/where, layout)
- LESSON 3: Laziness (чистота, неизменяемость, ленивость)
- LESSON 4: Recursion (хвостовая рекурсия с аккумулятором)
- LESSON 5: Guards (guards и where-связывания)
- LESSON 6: Types (примитивные типы, типы функций, кортежи)
- LESSON 7: Currying (каррирование, частичное применение)
- LESSON 8: Data types (ADT, pattern matching, Maybe, Either)
- LESSON 9: Lists (cons/nil, стандартные обходы)
- LESSON 10: Parsing (show/read)
- LESSON 11: Composition (композиция, point-free)
- LESSON 12: Lambdas (анонимные функции)
- LESSON 13: Infix (инфиксная и префиксная запись)
"""

from .base import LessonResult, Transcript
from .catalog import Catalog, LessonInfo, load_catalog
from .runner import LessonCheck, check_all, check_lesson, run_lesson

__all__ = [
    "LessonResult",
    "Transcript",
    "Catalog",
    "LessonInfo",
    "load_catalog",
    "LessonCheck",
    "check_all",
    "check_lesson",
    "run_lesson",
]
