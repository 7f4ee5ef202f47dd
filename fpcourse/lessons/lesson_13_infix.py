"""LESSON 13: Infix — инфиксная и префиксная запись

    7 `div` 2      -- функция между аргументами
    (+) 1 2        -- оператор перед аргументами
    (/ 2) 10       -- секция: оператор с одним зафиксированным операндом

Любую функцию двух аргументов можно записать инфиксно, любой оператор —
префиксно; запись не меняет смысла выражения.
"""

from fpcourse.core.errors import ProgramError
from fpcourse.core.functional.infix import div, elem, mod, prefix, section_left, section_right
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 13
SLUG = "infix"


def run() -> LessonResult:
    out = Transcript()

    out.show("7 `div` 2", 7 |div| 2)
    out.show("div 7 2", div(7, 2))
    out.show("(-7) `div` 2", -7 |div| 2)
    out.show("7 `mod` 3", 7 |mod| 3)
    out.show("3 `elem` [1,2,3]", 3 |elem| [1, 2, 3])
    out.show("(+) 1 2", prefix("+")(1)(2))
    out.show('(++) "ab" "cd"', prefix("++")("ab", "cd"))
    out.show("(/ 2) 10", section_right("/", 2)(10))
    out.show("(2 /) 10", section_left("/", 2)(10))

    try:
        1 |div| 0
    except ProgramError as exc:
        out.say(f"1 `div` 0 -> {type(exc).__name__}: {exc}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
