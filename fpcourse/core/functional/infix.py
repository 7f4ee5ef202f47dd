"""
Infix — переключение между инфиксной и префиксной записью

Урок 13:
    7 `div` 2     -- функция в инфиксной позиции (обратные кавычки)
    (+) 1 2       -- оператор в префиксной позиции (скобки)
    (/ 2) 10      -- секция: частично применённый оператор

Python не позволяет объявлять операторы, поэтому инфиксная запись
функции имитируется обёрткой: 7 |div| 2 == div(7, 2).
"""

import operator
from typing import Any, Callable, Dict, Final

from fpcourse.core.errors import error
from fpcourse.core.functional.currying import Curried


class Infix:
    """
    Функция двух аргументов, применяемая как a |f| b.

    Сама обёртка остаётся обычной функцией: f(a, b) тоже работает.
    """

    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[Any, Any], Any]):
        self.fn = fn

    def __call__(self, a: Any, b: Any) -> Any:
        return self.fn(a, b)

    def __ror__(self, left: Any) -> "_PartialInfix":
        return _PartialInfix(self.fn, left)

    def __or__(self, right: Any) -> Any:
        raise TypeError("infix operator is missing its left operand")

    def __repr__(self) -> str:
        return f"<infix {getattr(self.fn, '__name__', '?')}>"


class _PartialInfix:
    """Левый операнд уже известен: ожидается `| right`."""

    __slots__ = ("fn", "left")

    def __init__(self, fn: Callable[[Any, Any], Any], left: Any):
        self.fn = fn
        self.left = left

    def __or__(self, right: Any) -> Any:
        return self.fn(self.left, right)


def infix(fn: Callable[[Any, Any], Any]) -> Infix:
    """Декоратор: функция двух аргументов, доступная в инфиксной записи."""
    return Infix(fn)


# =============================================================================
# INTEGER DIVISION
# =============================================================================


@infix
def div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением к минус бесконечности.

    Raises:
        ProgramError: деление на ноль
    """
    if b == 0:
        error("divide by zero")
    return a // b


@infix
def mod(a: int, b: int) -> int:
    """Остаток со знаком делителя."""
    if b == 0:
        error("divide by zero")
    return a % b


@infix
def elem(x: Any, xs: Any) -> bool:
    """x `elem` xs"""
    return x in xs


# =============================================================================
# OPERATORS AS FUNCTIONS
# =============================================================================


def _concat(a: Any, b: Any) -> Any:
    return a + b


OPERATORS: Final[Dict[str, Callable[[Any, Any], Any]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
    "==": operator.eq,
    "/=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "&&": lambda a, b: a and b,
    "||": lambda a, b: a or b,
    "++": _concat,
}


def prefix(symbol: str) -> Curried:
    """
    Оператор в префиксной позиции: prefix("+")(1)(2) == 3.

    Raises:
        KeyError: неизвестный символ оператора
    """
    try:
        fn = OPERATORS[symbol]
    except KeyError:
        raise KeyError(f"unknown operator ({symbol})") from None
    return Curried(fn, 2)


def section_left(symbol: str, left: Any) -> Callable[[Any], Any]:
    """(x op): левый операнд зафиксирован. section_left("/", 10)(2) == 5.0"""
    fn = OPERATORS[symbol]
    return lambda right: fn(left, right)


def section_right(symbol: str, right: Any) -> Callable[[Any], Any]:
    """(op y): правый операнд зафиксирован. section_right("/", 2)(10) == 5.0"""
    fn = OPERATORS[symbol]
    return lambda left: fn(left, right)
