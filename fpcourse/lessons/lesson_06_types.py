"""LESSON 6: Types — статическая система типов

Каждое выражение имеет тип, известный до запуска программы:

    5          :: Int
    2.5        :: Double
    (1, "a")   :: (Int, String)
    isEven     :: Int -> Bool

Тип функции записывается стрелками: аргументы слева, результат справа.
Смешивать Int и Double без явного преобразования нельзя.
"""

from fpcourse.core.functional.currying import add
from fpcourse.core.functional.types import describe_type
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 6
SLUG = "types"


def is_even(n: int) -> bool:
    return n % 2 == 0


def run() -> LessonResult:
    out = Transcript()

    examples = [
        ("5", 5),
        ("2.5", 2.5),
        ('"hello"', "hello"),
        ("True", True),
        ('(1, "a")', (1, "a")),
        ("[1, 2, 3]", [1, 2, 3]),
        ("is_even", is_even),
        ("add", add),
        ("add 3", add(3)),
    ]
    for expression, value in examples:
        out.say(f"{expression} :: {describe_type(value)}")

    # fromIntegral: явное преобразование Int -> Double
    out.show("float 3 / 2", float(3) / 2)

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
