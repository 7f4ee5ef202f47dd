r"""LESSON 12: Lambdas — анонимные функции

    map (\x -> x * x) [1, 2, 3]
    foldl (\acc x -> acc * 10 + x) 0 [1, 2, 3]

Лямбда — функция без имени, записанная прямо в месте использования,
обычно как аргумент функции высшего порядка. Лямбда замыкает переменные
окружения: \n -> \x -> x + n возвращает новую функцию для каждого n.
"""

import functools

from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 12
SLUG = "lambdas"


def run() -> LessonResult:
    out = Transcript()

    out.show(r"map (\x -> x * x) [1,2,3]", list(map(lambda x: x * x, [1, 2, 3])))
    out.show(r"filter (\x -> x > 2) [1,2,3,4]", list(filter(lambda x: x > 2, [1, 2, 3, 4])))
    out.show(
        r"foldl (\acc x -> acc * 10 + x) 0 [1,2,3]",
        functools.reduce(lambda acc, x: acc * 10 + x, [1, 2, 3], 0),
    )
    out.show(r"(\x y -> x + y) 2 3", (lambda x, y: x + y)(2, 3))
    out.show(
        r'sortOn (\(_, s) -> s) [(1,"b"),(2,"a")]',
        sorted([(1, "b"), (2, "a")], key=lambda pair: pair[1]),
    )

    adders = [lambda x, n=n: x + n for n in (1, 2, 3)]
    out.show(r"map ($ 10) (map (\n x -> x + n) [1,2,3])", [add_n(10) for add_n in adders])

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
