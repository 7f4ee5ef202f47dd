"""LESSON 11: Composition — композиция функций и point-free стиль

    countLowerCase :: String -> Int
    countLowerCase = length . filter isLower

(f . g) x = f (g x). Определение в point-free стиле не называет аргумент:
функция собирается из других функций. pipe записывает ту же цепочку
в порядке применения.
"""

import functools
import operator

from fpcourse.core.functional.composition import compose, pipe
from fpcourse.core.functional.text import count_lower_case, count_lower_or_digit
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 11
SLUG = "composition"

negate_abs = compose(operator.neg, abs)
word_count = compose(len, str.split)
sum_of_odd_squares = pipe(
    functools.partial(filter, lambda n: n % 2 == 1),
    functools.partial(map, lambda n: n**2),
    sum,
)


def run() -> LessonResult:
    out = Transcript()

    out.show('count_lower_case "Hello World"', count_lower_case("Hello World"))
    out.show('count_lower_case ""', count_lower_case(""))
    out.show('count_lower_or_digit "abc123XYZ"', count_lower_or_digit("abc123XYZ"))
    out.show("(negate . abs) (-5)", negate_abs(-5))
    out.show('(length . words) "the quick brown fox"', word_count("the quick brown fox"))
    out.show("(sum . map (^2) . filter odd) [1..5]", sum_of_odd_squares(range(1, 6)))

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
