"""LESSON 7: Currying — каррирование и частичное применение

    add :: Int -> Int -> Int       -- то же, что Int -> (Int -> Int)
    addThree = add 3
    map (add 10) [1, 2, 3]

Функция нескольких аргументов — это функция одного аргумента,
возвращающая функцию от остальных. Применив часть аргументов,
получаем новую функцию.
"""

from fpcourse.core.functional.currying import add, flip, multiply_three, subtract, uncurry
from fpcourse.core.functional.types import describe_type
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 7
SLUG = "currying"


def run() -> LessonResult:
    out = Transcript()

    out.show("add 1 2", add(1, 2))
    out.show("(add 1) 2", add(1)(2))

    add_three = add(3)
    out.show("add_three = add 3; add_three 4", add_three(4))
    out.show("map (add 10) [1,2,3]", list(map(add(10), [1, 2, 3])))

    out.show("multiply_three 2 3 4", multiply_three(2)(3)(4))
    out.say(f"multiply_three 2 3 :: {describe_type(multiply_three(2, 3))}")

    out.show("flip subtract 1 10", flip(subtract)(1)(10))
    out.show("uncurry add (3, 4)", uncurry(add)((3, 4)))

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
