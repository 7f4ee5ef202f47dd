"""LESSON 8: Data types — алгебраические типы и сопоставление с образцом

    data Point = Cartesian Double Double | Polar Double Double
    data Color = Red | Green | Blue | Yellow
    data Maybe a = Nothing | Just a
    data Either a b = Left a | Right b

Тип перечисляет свои формы конструирования; функция разбирает значение
по форме (pattern matching). Maybe выражает возможное отсутствие значения,
Either — результат, который может оказаться ошибкой: обработать нужно оба случая.
"""

import operator
from typing import assert_never

from fpcourse.core.domain.color import Color, all_colors, is_primary, succ
from fpcourse.core.domain.either import EitherForm, Left, Right, either, safe_divide
from fpcourse.core.domain.maybe import from_maybe, safe_div
from fpcourse.core.domain.point import Cartesian, Polar, distance_from_origin, to_cartesian
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 8
SLUG = "data_types"


def describe_result(result: EitherForm[str, float]) -> str:
    """Полный разбор Either: пропуск ветки ловит проверка типов (assert_never)."""
    match result:
        case Left(error=err):
            return f"failed: {err}"
        case Right(value=v):
            return f"ok: {v}"
        case _:
            assert_never(result)


def run() -> LessonResult:
    out = Transcript()

    out.show("distance_from_origin (Cartesian 3.0 4.0)", distance_from_origin(Cartesian(x=3.0, y=4.0)))
    out.show("distance_from_origin (Polar 2.0 0.0)", distance_from_origin(Polar(r=2.0, theta=0.0)))
    out.show("to_cartesian (Polar 2.0 0.0)", to_cartesian(Polar(r=2.0, theta=0.0)))

    out.show("[minBound .. maxBound] :: [Color]", all_colors())
    out.show("succ Red", succ(Color.RED))
    out.show("is_primary Yellow", is_primary(Color.YELLOW))

    out.show("safe_div 10 2", safe_div(10, 2))
    out.show("safe_div 1 0", safe_div(1, 0))
    out.show("from_maybe 0 (safe_div 1 0)", from_maybe(0, safe_div(1, 0)))

    out.show("safe_divide 1 0", safe_divide(1, 0))
    out.show("safe_divide 6 3", safe_divide(6, 3))
    out.say(f"describe_result (safe_divide 1 0) = {describe_result(safe_divide(1, 0))}")
    out.show("either len negate (Right 5)", either(len, operator.neg, Right(5)))

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
