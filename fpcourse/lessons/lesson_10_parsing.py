"""LESSON 10: Parsing — разбор значений из строки

    read "42" :: Int                 -- 42
    read "Just 5" :: Maybe Int       -- Just 5
    readMaybe "forty-two" :: Maybe Int  -- Nothing

Для типа с выведенными show/read текстовая форма значения совпадает с тем,
как оно записывается в коде. Тип результата задаётся явно; текст, который
не является значением этого типа, — ошибка (read) или Nothing (readMaybe).
"""

from typing import Any, List, Tuple

from fpcourse.core.domain.color import Color
from fpcourse.core.domain.either import Either
from fpcourse.core.domain.maybe import NOTHING, Just, Maybe
from fpcourse.core.domain.point import Cartesian, Point
from fpcourse.core.functional.parsing import read, read_maybe, show
from fpcourse.core.functional.types import annotation_name
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 10
SLUG = "parsing"

EXAMPLES: List[Tuple[str, Any]] = [
    ("42", int),
    ("3.5", float),
    ("[1,2,3]", List[int]),
    ("Just 5", Maybe[int]),
    ('(1,"a")', Tuple[int, str]),
    ("Cartesian 1.5 (-2.0)", Point),
    ("[Red,Blue]", List[Color]),
    ('Left "oops"', Either[str, int]),
]


def run() -> LessonResult:
    out = Transcript()

    for text, target in EXAMPLES:
        out.show(f"read {show(text)} :: {annotation_name(target)}", read(text, target))

    out.show('read_maybe "forty-two" :: Int', read_maybe("forty-two", int))

    value = Just(Cartesian(x=0.0, y=1.0))
    out.show(f"show ({show(value)})", show(value))

    xs = [Just(1), NOTHING]
    out.say(f"read (show xs) == xs: {read(show(xs), List[Maybe[int]]) == xs}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
