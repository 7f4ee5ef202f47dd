"""
Text — подсчёт символов в point-free стиле

Урок 11:
    countLowerCase :: String -> Int
    countLowerCase = length . filter isLower

    countLowerOrDigit = length . filter (\\c -> isLower c || isDigit c)

Ни одна из функций не называет свой аргумент: это композиции
length и частично применённого filter.
"""

import functools
from typing import Callable, Iterable

from fpcourse.core.functional.composition import compose


def length(xs: Iterable[object]) -> int:
    """Длина произвольного конечного iterable."""
    return sum(1 for _ in xs)


def count_matching(predicate: Callable[[str], bool]) -> Callable[[str], int]:
    """length . filter predicate"""
    return compose(length, functools.partial(filter, predicate))


def is_lower(c: str) -> bool:
    """Строчная буква (любого алфавита)."""
    return c.islower()


def is_digit(c: str) -> bool:
    """Десятичная цифра 0-9."""
    return "0" <= c <= "9"


def either_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    """Предикат, истинный если истинен хотя бы один из predicates."""
    return lambda c: any(p(c) for p in predicates)


count_lower_case: Callable[[str], int] = count_matching(is_lower)
count_lower_case.__doc__ = "Число строчных букв: count_lower_case('Hello World') == 8"

count_lower_or_digit: Callable[[str], int] = count_matching(either_of(is_lower, is_digit))
count_lower_or_digit.__doc__ = "Число строчных букв и цифр: count_lower_or_digit('abc123XYZ') == 6"

count_upper_case: Callable[[str], int] = count_matching(str.isupper)
