"""LESSON 4: Recursion — рекурсия вместо циклов

    factorial :: Integer -> Integer
    factorial n = go n 1
      where go k acc
              | k <= 1    = acc
              | otherwise = go (k - 1) (k * acc)

Хвостовой вызов с аккумулятором не растит стек: на большом входе
(factorial 100000) программа завершается. Наивная рекурсия без аккумулятора
держит кадр на каждый уровень и на том же входе исчерпывает стек.
"""

import math
from typing import Final

from fpcourse.config import get_settings
from fpcourse.core.functional.recursion import factorial, fibonacci, gcd, naive_factorial, sum_to
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 4
SLUG = "recursion"

# Глубина, на которой наивная рекурсия гарантированно упирается в лимит стека
NAIVE_DEPTH_DEMO: Final[int] = 100_000


def run() -> LessonResult:
    out = Transcript()

    out.show("factorial 0", factorial(0))
    out.show("factorial 1", factorial(1))
    out.show("factorial 5", factorial(5))
    out.show("fibonacci 10", fibonacci(10))
    out.show("sum_to 100", sum_to(100))
    out.show("gcd 48 18", gcd(48, 18))

    n = get_settings().big_factorial_n
    out.say(f"factorial {n} == math.factorial({n}): {factorial(n) == math.factorial(n)}")

    try:
        naive_factorial(NAIVE_DEPTH_DEMO)
    except RecursionError as exc:
        out.say(f"naive_factorial {NAIVE_DEPTH_DEMO}: {type(exc).__name__}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
